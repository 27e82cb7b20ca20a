#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for heading slug generation."""

import pytest

from md2html.dom import element, text
from md2html.utils.text import fold_diacritics, heading_to_slug


@pytest.mark.unit
class TestFoldDiacritics:
    """Test folding of accented letters."""

    def test_accents_fold_to_ascii(self) -> None:
        """Test common accented letters fold to their base letter."""
        assert fold_diacritics("àéîõüç") == "aeiouc"
        assert fold_diacritics("ÀÉÎÕÜÇ") == "AEIOUC"

    def test_ligatures_fold_to_pairs(self) -> None:
        """Test ligatures become letter pairs."""
        assert fold_diacritics("Æ") == "AE"
        assert fold_diacritics("ß") == "ss"

    def test_separators_become_dashes(self) -> None:
        """Test whitespace and punctuation separators fold to dashes."""
        assert fold_diacritics("a b,c:d") == "a-b-c-d"

    def test_unknown_characters_pass_through(self) -> None:
        """Test characters outside the table are unchanged."""
        assert fold_diacritics("日本") == "日本"


@pytest.mark.unit
class TestHeadingToSlug:
    """Test heading identifier and title derivation."""

    def test_example_heading(self) -> None:
        """Test accents, punctuation and percent signs."""
        assert heading_to_slug([text("Héllo, World! 100%")]) == ("hello-world-100", "Héllo, World! 100%")

    def test_nested_markup_contributes_text(self) -> None:
        """Test text inside nested elements is part of the title."""
        children = [text("Using "), element("span", text("dataclasses"), attrs=['class="inline-code"'])]
        assert heading_to_slug(children) == ("using-dataclasses", "Using dataclasses")

    def test_runs_collapse_and_trim(self) -> None:
        """Test runs of invalid characters collapse to one dash and are trimmed."""
        slug, _ = heading_to_slug([text("  ***Why?!***  ")])
        assert slug == "why"

    def test_underscores_survive(self) -> None:
        """Test underscores fold to dashes like other separators."""
        slug, _ = heading_to_slug([text("snake_case name")])
        assert slug == "snake-case-name"

    def test_identical_titles_give_identical_ids(self) -> None:
        """Test ids are not deduplicated."""
        assert heading_to_slug([text("Intro")]) == heading_to_slug([text("Intro")])

    def test_empty_heading(self) -> None:
        """Test an empty heading yields empty id and title."""
        assert heading_to_slug([]) == ("", "")
