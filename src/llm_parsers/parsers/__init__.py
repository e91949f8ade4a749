# src/llm_parsers/parsers/__init__.py

"""Typed output parsers for llm-parsers.

Turns free-text model output into typed values, and describes the
expected answer format for the prompt.

Design principles:
- Stateless: Parsers are shared singletons, safe to call concurrently
- Strict: Bad output raises FormatError, never a silent default
- No behavior: Retrying the model with feedback is the caller's job

Example:
    >>> from llm_parsers.parsers import FormatError, create_output_parser
    >>>
    >>> parser = create_output_parser("short")
    >>> prompt += "\\nAnswer with: " + parser.format_instructions()
    >>>
    >>> try:
    ...     value = parser.parse(response.content)
    ... except FormatError as e:
    ...     print(e.reason, e.text)
"""

from .base import OutputParser
from .boolean import BooleanOutputParser
from .enums import EnumOutputParser
from .errors import FormatError, FormatErrorReason
from .factory import create_output_parser
from .model import ModelOutputParser
from .numeric import (
    BigIntegerOutputParser,
    ByteOutputParser,
    DecimalOutputParser,
    DoubleOutputParser,
    FloatOutputParser,
    IntegerOutputParser,
    LongOutputParser,
    ShortOutputParser,
)
from .sequences import ListOutputParser, SetOutputParser
from .temporal import DateOutputParser, DateTimeOutputParser, TimeOutputParser

__all__ = [
    # Factory
    "create_output_parser",
    # Protocol
    "OutputParser",
    # Errors
    "FormatError",
    "FormatErrorReason",
    # Numeric
    "ByteOutputParser",
    "ShortOutputParser",
    "IntegerOutputParser",
    "LongOutputParser",
    "BigIntegerOutputParser",
    "FloatOutputParser",
    "DoubleOutputParser",
    "DecimalOutputParser",
    # Other scalars
    "BooleanOutputParser",
    "EnumOutputParser",
    "DateOutputParser",
    "TimeOutputParser",
    "DateTimeOutputParser",
    # Structured
    "ListOutputParser",
    "SetOutputParser",
    "ModelOutputParser",
]
