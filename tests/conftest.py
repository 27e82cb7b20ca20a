"""Pytest configuration and shared fixtures for the md2html test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

from pathlib import Path

import pytest

FRONT_MATTER = """+++
title = "Hello World"
tags = ["python", "blog"]
author = "ada"
avatar = "/avatars/ada.png"
+++
"""


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test files.

    Returns
    -------
    Path
        Empty directory removed by pytest after the session.

    """
    return tmp_path


@pytest.fixture
def front_matter() -> str:
    """Provide a valid front matter block."""
    return FRONT_MATTER


@pytest.fixture
def sample_post() -> str:
    """Provide a blog post exercising most Markdown features.

    Returns
    -------
    str
        Markdown with front matter, headings, a table, code, tasks and footnotes.

    """
    return (
        FRONT_MATTER
        + """
# Introduction

Welcome to the post (c) 2024... It has a footnote[^1] and another[^2].

## Details

| Left | Center | Plain |
|:-----|:------:|-------|
| a    | b      | c     |
| d    | e      | f     |

```python
def hello():
    return "world"
```

- [x] done
- [ ] todo
- [-] dropped

Term
: Definition of the term

Visit [the docs](https://docs.example.com "Docs") or [home](/index.html).

# Conclusion

Thanks for reading :) and see you soon :wave:

[^1]: First note.
[^2]: Second note.
"""
    )
