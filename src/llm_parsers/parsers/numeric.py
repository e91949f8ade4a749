# src/llm_parsers/parsers/numeric.py

import math
import re
from decimal import Decimal, InvalidOperation

from .base import OutputParser
from .errors import FormatError, FormatErrorReason

# ASCII only: int() and float() would also accept underscores and
# non-ASCII digits, which are not valid answers.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Halfway between float32 max and the next step: anything below rounds to max
FLOAT32_LIMIT = 3.4028235677973366e38


class _IntegerRangeOutputParser(OutputParser[int]):
    """Base-10 integer bounded to a fixed-width signed range."""

    min_value: int
    max_value: int

    def parse(self, text: str) -> int:
        literal = _match_integer(self, text)
        # Too many digits to fit: reject before int() hits its digit limit
        if len(literal.lstrip("-")) > len(str(self.max_value)):
            raise self._out_of_range(text)

        value = int(literal)
        if not self.min_value <= value <= self.max_value:
            raise self._out_of_range(text)
        return value

    def _out_of_range(self, text: str) -> FormatError:
        return self._fail(
            text,
            FormatErrorReason.OUT_OF_RANGE,
            f"expected [{self.min_value}, {self.max_value}]",
        )

    def format_instructions(self) -> str:
        return f"integer number in range [{self.min_value}, {self.max_value}]"


class ByteOutputParser(_IntegerRangeOutputParser):
    type_name = "byte"
    min_value = -(2**7)
    max_value = 2**7 - 1


class ShortOutputParser(_IntegerRangeOutputParser):
    type_name = "short"
    min_value = -(2**15)
    max_value = 2**15 - 1


class IntegerOutputParser(_IntegerRangeOutputParser):
    type_name = "integer"
    min_value = -(2**31)
    max_value = 2**31 - 1


class LongOutputParser(_IntegerRangeOutputParser):
    type_name = "long"
    min_value = -(2**63)
    max_value = 2**63 - 1


class BigIntegerOutputParser(OutputParser[int]):
    """Unbounded integer, the natural target for Python's ``int``."""

    type_name = "big integer"

    def parse(self, text: str) -> int:
        literal = _match_integer(self, text)
        try:
            return int(literal)
        except ValueError as exc:
            # sys.get_int_max_str_digits() exceeded
            raise self._fail(text, FormatErrorReason.OUT_OF_RANGE, str(exc)) from exc

    def format_instructions(self) -> str:
        return "integer number"


class FloatOutputParser(OutputParser[float]):
    """Floating point number that fits a 32-bit float."""

    type_name = "float"

    def parse(self, text: str) -> float:
        value = float(_match_float(self, text))
        if math.isinf(value) or abs(value) >= FLOAT32_LIMIT:
            raise self._fail(
                text,
                FormatErrorReason.OUT_OF_RANGE,
                f"magnitude must be below {FLOAT32_LIMIT}",
            )
        return value

    def format_instructions(self) -> str:
        return "floating point number"


class DoubleOutputParser(OutputParser[float]):
    type_name = "double"

    def parse(self, text: str) -> float:
        value = float(_match_float(self, text))
        if math.isinf(value):
            raise self._fail(text, FormatErrorReason.OUT_OF_RANGE)
        return value

    def format_instructions(self) -> str:
        return "floating point number"


class DecimalOutputParser(OutputParser[Decimal]):
    """Arbitrary-precision decimal. Preserves the digits the model wrote."""

    type_name = "decimal"

    def parse(self, text: str) -> Decimal:
        literal = _match_float(self, text)
        try:
            return Decimal(literal)
        except InvalidOperation as exc:
            raise self._fail(text, FormatErrorReason.NOT_A_NUMBER) from exc

    def format_instructions(self) -> str:
        return "floating point number"


def _match_integer(parser: OutputParser, text: str) -> str:
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise parser._fail(text, FormatErrorReason.NOT_A_NUMBER)
    # Sign and leading zeros dropped so only significant digits count
    sign = "-" if stripped.startswith("-") else ""
    return sign + (stripped.lstrip("+-").lstrip("0") or "0")


def _match_float(parser: OutputParser, text: str) -> str:
    stripped = text.strip()
    if not _FLOAT_RE.fullmatch(stripped):
        raise parser._fail(text, FormatErrorReason.NOT_A_NUMBER)
    return stripped
