"""Tests for provider/model syntax parsing."""

import pytest

from modelhub.core.catalog.errors import InvalidSyntaxError
from modelhub.core.catalog.syntax import alias_key, extract_shorthand, parse_provider_model_syntax


class TestParseProviderModelSyntax:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("gemini/2.5-flash", ("gemini", "2.5-flash")),
            ("gemini/flash", ("gemini", "flash")),
            ("vertexai/1.5-pro", ("vertexai", "1.5-pro")),
            ("flash", ("", "flash")),
            ("  openai/gpt-5  ", ("openai", "gpt-5")),
        ],
    )
    def test_valid(self, text: str, expected: tuple[str, str]) -> None:
        assert parse_provider_model_syntax(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "/flash", "gemini/", "/", "a/b/c", "gemini//flash"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidSyntaxError):
            parse_provider_model_syntax(text)

    def test_empty_error_reason(self) -> None:
        with pytest.raises(InvalidSyntaxError, match="cannot be empty"):
            parse_provider_model_syntax("")


class TestHelpers:
    def test_alias_key(self) -> None:
        assert alias_key("gemini", "flash") == "gemini/flash"

    def test_extract_shorthand(self) -> None:
        assert extract_shorthand("gemini-2.5-flash") == "2.5-flash"
        assert extract_shorthand("gemini-1.5-pro") == "1.5-pro"

    def test_extract_shorthand_without_dash(self) -> None:
        assert extract_shorthand("o3") == "o3"
