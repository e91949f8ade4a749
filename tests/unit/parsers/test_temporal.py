# tests/unit/parsers/test_temporal.py

from datetime import date, datetime, time

import pytest

from llm_parsers.parsers.errors import FormatError, FormatErrorReason
from llm_parsers.parsers.temporal import (
    DateOutputParser,
    DateTimeOutputParser,
    TimeOutputParser,
)


class TestDateOutputParser:
    def test_parse_iso_date(self) -> None:
        assert DateOutputParser().parse(" 2024-02-29 ") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "text", ["2024/01/01", "20240101", "2024-1-1", "Jan 1 2024", "", "2024-W01-1"]
    )
    def test_wrong_shape_is_invalid_format(self, text: str) -> None:
        """Test that only yyyy-MM-dd is accepted."""
        with pytest.raises(FormatError) as exc_info:
            DateOutputParser().parse(text)

        assert exc_info.value.reason == FormatErrorReason.INVALID_FORMAT
        assert exc_info.value.target_type == "date"

    @pytest.mark.parametrize("text", ["2023-02-29", "2024-13-01", "0000-01-01"])
    def test_impossible_date_is_out_of_range(self, text: str) -> None:
        with pytest.raises(FormatError) as exc_info:
            DateOutputParser().parse(text)

        assert exc_info.value.reason == FormatErrorReason.OUT_OF_RANGE
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_format_instructions(self) -> None:
        assert DateOutputParser().format_instructions() == "yyyy-MM-dd"


class TestTimeOutputParser:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("13:45:30", time(13, 45, 30)),
            ("08:05", time(8, 5)),
            ("23:59:59.5", time(23, 59, 59, 500000)),
            ("00:00:00.123456789", time(0, 0, 0, 123456)),
        ],
    )
    def test_parse_iso_time(self, text: str, expected: time) -> None:
        assert TimeOutputParser().parse(text) == expected

    def test_hour_24_is_out_of_range(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            TimeOutputParser().parse("24:00:00")

        assert exc_info.value.reason == FormatErrorReason.OUT_OF_RANGE

    @pytest.mark.parametrize("text", ["1:30", "13:45:30Z", "noon", "13-45-30"])
    def test_wrong_shape_is_invalid_format(self, text: str) -> None:
        with pytest.raises(FormatError) as exc_info:
            TimeOutputParser().parse(text)

        assert exc_info.value.reason == FormatErrorReason.INVALID_FORMAT

    def test_format_instructions(self) -> None:
        assert TimeOutputParser().format_instructions() == "HH:mm:ss"


class TestDateTimeOutputParser:
    def test_parse_iso_datetime(self) -> None:
        assert DateTimeOutputParser().parse("2024-05-01T09:30:00") == datetime(
            2024, 5, 1, 9, 30
        )

    def test_result_is_naive(self) -> None:
        assert DateTimeOutputParser().parse("2024-05-01T09:30").tzinfo is None

    @pytest.mark.parametrize(
        "text", ["2024-05-01 09:30:00", "2024-05-01", "2024-05-01T09:30:00+02:00"]
    )
    def test_wrong_shape_is_invalid_format(self, text: str) -> None:
        with pytest.raises(FormatError) as exc_info:
            DateTimeOutputParser().parse(text)

        assert exc_info.value.reason == FormatErrorReason.INVALID_FORMAT
        assert exc_info.value.target_type == "datetime"

    def test_impossible_field_is_out_of_range(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            DateTimeOutputParser().parse("2024-04-31T10:00:00")

        assert exc_info.value.reason == FormatErrorReason.OUT_OF_RANGE

    def test_format_instructions(self) -> None:
        assert (
            DateTimeOutputParser().format_instructions() == "yyyy-MM-ddTHH:mm:ss"
        )
