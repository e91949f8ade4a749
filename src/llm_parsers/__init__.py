# Parsers
from .parsers import (
    BigIntegerOutputParser,
    BooleanOutputParser,
    ByteOutputParser,
    DateOutputParser,
    DateTimeOutputParser,
    DecimalOutputParser,
    DoubleOutputParser,
    EnumOutputParser,
    FloatOutputParser,
    IntegerOutputParser,
    ListOutputParser,
    LongOutputParser,
    ModelOutputParser,
    OutputParser,
    SetOutputParser,
    ShortOutputParser,
    TimeOutputParser,
    create_output_parser,
)

# Errors
from .parsers import FormatError, FormatErrorReason

__all__ = [
    # Parsers
    "OutputParser",
    "create_output_parser",
    "ByteOutputParser",
    "ShortOutputParser",
    "IntegerOutputParser",
    "LongOutputParser",
    "BigIntegerOutputParser",
    "FloatOutputParser",
    "DoubleOutputParser",
    "DecimalOutputParser",
    "BooleanOutputParser",
    "EnumOutputParser",
    "DateOutputParser",
    "TimeOutputParser",
    "DateTimeOutputParser",
    "ListOutputParser",
    "SetOutputParser",
    "ModelOutputParser",
    # Errors
    "FormatError",
    "FormatErrorReason",
]
