# tests/unit/parsers/test_boolean.py

import pytest

from llm_parsers.parsers.boolean import BooleanOutputParser
from llm_parsers.parsers.errors import FormatError, FormatErrorReason


class TestBooleanOutputParser:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("true", True), ("false", False), (" TRUE ", True), ("False\n", False)],
    )
    def test_parse_literals(self, text: str, expected: bool) -> None:
        """Test that the literals parse case-insensitively after trimming."""
        assert BooleanOutputParser().parse(text) is expected

    @pytest.mark.parametrize("text", ["yes", "1", "", "truth", "t"])
    def test_other_text_raises(self, text: str) -> None:
        """Test that nothing is coerced to a boolean."""
        with pytest.raises(FormatError) as exc_info:
            BooleanOutputParser().parse(text)

        assert exc_info.value.reason == FormatErrorReason.INVALID_FORMAT
        assert exc_info.value.target_type == "boolean"

    def test_format_instructions(self) -> None:
        assert BooleanOutputParser().format_instructions() == "one of [true, false]"
