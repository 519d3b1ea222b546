"""Unit tests for TermSanitizer (normalization and wildcard tokens)."""

import re

import pytest

from ranked_search.application.dtos.search import WILDCARD, TokenSet
from ranked_search.application.services.term_sanitizer import TermSanitizer

_TOKEN_RE = re.compile(r"^[A-Za-z0-9]+\*$")


class TestSanitize:
    """Tests for TermSanitizer.sanitize."""

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n ", "!!! ?? ;;", "'\"();--"])
    def test_empty_inputs_yield_empty_token_set(self, raw) -> None:
        tokens = TermSanitizer().sanitize(raw)
        assert tokens == TokenSet()
        assert tokens.is_empty
        assert len(tokens) == 0
        assert tokens.as_boolean_query() == ""

    def test_single_word_gets_wildcard(self) -> None:
        assert TermSanitizer().sanitize("pump").tokens == ("pump*",)

    def test_whitespace_collapsed_and_trimmed(self) -> None:
        tokens = TermSanitizer().sanitize("  hydraulic \t\n  pump  ")
        assert tokens.tokens == ("hydraulic*", "pump*")
        assert tokens.as_boolean_query() == "hydraulic* pump*"

    def test_punctuation_stripped_inside_words(self) -> None:
        assert TermSanitizer().sanitize("o'brien's pump-42").tokens == (
            "obriens*",
            "pump42*",
        )

    def test_boolean_operators_removed(self) -> None:
        tokens = TermSanitizer().sanitize('+pump -valve "seal kit" (motor*) ~x <y >z @3')
        assert tokens.tokens == (
            "pump*", "valve*", "seal*", "kit*", "motor*", "x*", "y*", "z*", "3*",
        )

    def test_non_ascii_letters_dropped(self) -> None:
        assert TermSanitizer().sanitize("café naïve ü").tokens == ("caf*", "nave*")

    def test_case_preserved(self) -> None:
        assert TermSanitizer().sanitize("ABC def").tokens == ("ABC*", "def*")

    def test_order_preserved(self) -> None:
        assert TermSanitizer().sanitize("c b a").tokens == ("c*", "b*", "a*")

    @pytest.mark.parametrize(
        "raw",
        [
            "'; DROP TABLE subject; --",
            "a\x00b",
            "1 OR 1=1",
            "%_\\",
            "x" * 300,
            "émoji 🚀 test",
        ],
    )
    def test_tokens_contain_only_alphanumerics_and_wildcard(self, raw) -> None:
        tokens = TermSanitizer().sanitize(raw)
        assert all(_TOKEN_RE.match(t) for t in tokens)
        assert all(t.count(WILDCARD) == 1 for t in tokens)

    def test_max_tokens_keeps_leading_tokens(self) -> None:
        tokens = TermSanitizer(max_tokens=2).sanitize("one two three four")
        assert tokens.tokens == ("one*", "two*")

    def test_max_tokens_not_applied_when_under_cap(self) -> None:
        tokens = TermSanitizer(max_tokens=5).sanitize("one two")
        assert tokens.tokens == ("one*", "two*")


class TestNormalize:
    """Tests for TermSanitizer.normalize."""

    def test_none_is_empty_string(self) -> None:
        assert TermSanitizer.normalize(None) == ""

    def test_removed_character_does_not_leave_double_space(self) -> None:
        assert TermSanitizer.normalize("pump - valve") == "pump valve"
