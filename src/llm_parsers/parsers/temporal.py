# src/llm_parsers/parsers/temporal.py

"""ISO-8601 local date and time parsers.

The grammar is checked with a regex before any value is built, so
``datetime.fromisoformat`` leniency (basic format, week dates, offsets)
never leaks into what the model is allowed to answer.
"""

import re
from datetime import date, datetime, time

from .base import OutputParser
from .errors import FormatErrorReason

_DATE = r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
_TIME = (
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})"
    r"(?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]{1,9}))?)?"
)

_DATE_RE = re.compile(_DATE)
_TIME_RE = re.compile(_TIME)
_DATETIME_RE = re.compile(_DATE + "T" + _TIME)


class DateOutputParser(OutputParser[date]):
    type_name = "date"

    def parse(self, text: str) -> date:
        match = _DATE_RE.fullmatch(text.strip())
        if match is None:
            raise self._fail(text, FormatErrorReason.INVALID_FORMAT)
        try:
            return _build_date(match)
        except ValueError as exc:
            raise self._fail(text, FormatErrorReason.OUT_OF_RANGE, str(exc)) from exc

    def format_instructions(self) -> str:
        return "yyyy-MM-dd"


class TimeOutputParser(OutputParser[time]):
    """Local time. Seconds are optional, fractions are cut to microseconds."""

    type_name = "time"

    def parse(self, text: str) -> time:
        match = _TIME_RE.fullmatch(text.strip())
        if match is None:
            raise self._fail(text, FormatErrorReason.INVALID_FORMAT)
        try:
            return _build_time(match)
        except ValueError as exc:
            raise self._fail(text, FormatErrorReason.OUT_OF_RANGE, str(exc)) from exc

    def format_instructions(self) -> str:
        return "HH:mm:ss"


class DateTimeOutputParser(OutputParser[datetime]):
    """Naive local date-time joined by ``T``."""

    type_name = "datetime"

    def parse(self, text: str) -> datetime:
        match = _DATETIME_RE.fullmatch(text.strip())
        if match is None:
            raise self._fail(text, FormatErrorReason.INVALID_FORMAT)
        try:
            return datetime.combine(_build_date(match), _build_time(match))
        except ValueError as exc:
            raise self._fail(text, FormatErrorReason.OUT_OF_RANGE, str(exc)) from exc

    def format_instructions(self) -> str:
        return "yyyy-MM-ddTHH:mm:ss"


def _build_date(match: re.Match) -> date:
    return date(int(match["year"]), int(match["month"]), int(match["day"]))


def _build_time(match: re.Match) -> time:
    fraction = match["fraction"] or ""
    microsecond = int(fraction[:6].ljust(6, "0"))
    return time(
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"] or 0),
        microsecond,
    )
