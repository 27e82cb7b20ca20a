#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for typography and emoticon substitution."""

import pytest

from md2html.exceptions import InternalConsistencyError
from md2html.utils.typography import (
    EMOTICONS,
    TYPOGRAPHY,
    replace_emoticons,
    replace_typography,
    resolve_emoji,
    substitute,
)


@pytest.mark.unit
class TestTypography:
    """Test typographic replacements."""

    @pytest.mark.parametrize("token,symbol", sorted(TYPOGRAPHY.items()))
    def test_every_token(self, token: str, symbol: str) -> None:
        """Test each token is replaced inside surrounding text."""
        assert replace_typography(f"x{token}y") == f"x{symbol}y"

    def test_example_sentence(self) -> None:
        """Test several tokens in one string."""
        assert replace_typography("Copyright (c) 2024... done") == "Copyright © 2024… done"

    def test_longer_runs_of_dots(self) -> None:
        """Test replacement is a single left-to-right pass."""
        assert replace_typography("....") == "…."

    def test_no_tokens(self) -> None:
        """Test text without tokens is returned unchanged."""
        assert replace_typography("plain text") == "plain text"


@pytest.mark.unit
class TestEmoticons:
    """Test emoticon replacement."""

    def test_standalone_face(self) -> None:
        """Test a whitespace-bounded face becomes an emoji."""
        assert replace_emoticons("feeling :) today") == "feeling 😃 today"

    def test_face_at_string_bounds(self) -> None:
        """Test faces at the start and end of text are replaced."""
        assert replace_emoticons(":)") == "😃"
        assert replace_emoticons("bye ;)") == "bye 😉"

    def test_embedded_face_untouched(self) -> None:
        """Test faces glued to other characters are left alone."""
        assert replace_emoticons("party:)time") == "party:)time"
        assert replace_emoticons("http://example.com") == "http://example.com"

    def test_longest_face_wins(self) -> None:
        """Test a face is not replaced by one of its prefixes."""
        assert replace_emoticons("oops :'( sorry") == "oops 😢 sorry"
        assert replace_emoticons(":-) ok") == "😃 ok"

    def test_every_face_resolves(self) -> None:
        """Test every emoticon name maps to an emoji."""
        for name in set(EMOTICONS.values()):
            glyph = resolve_emoji(name)
            assert glyph and f":{name}:" != glyph

    def test_unknown_name_raises(self) -> None:
        """Test an unresolvable emoji name is an internal error."""
        with pytest.raises(InternalConsistencyError):
            resolve_emoji("definitely_not_an_emoji")


@pytest.mark.unit
class TestSubstitute:
    """Test the combined pipeline."""

    def test_typography_runs_before_emoticons(self) -> None:
        """Test both passes apply in order."""
        assert substitute("(c) 2024 :D") == "© 2024 😄"

    def test_does_not_escape_html(self) -> None:
        """Test substitution leaves markup characters for the serializer."""
        assert substitute("a & <b> :)") == "a & <b> 😃"
