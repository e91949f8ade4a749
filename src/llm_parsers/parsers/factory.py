# src/llm_parsers/parsers/factory.py

import logging
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, get_args, get_origin

from pydantic import BaseModel

from .base import OutputParser
from .boolean import BooleanOutputParser
from .enums import EnumOutputParser
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

logger = logging.getLogger(__name__)

# Stateless, so one shared instance per scalar type
_BYTE = ByteOutputParser()
_SHORT = ShortOutputParser()
_INTEGER = IntegerOutputParser()
_LONG = LongOutputParser()
_BIG_INTEGER = BigIntegerOutputParser()
_FLOAT = FloatOutputParser()
_DOUBLE = DoubleOutputParser()
_DECIMAL = DecimalOutputParser()
_BOOLEAN = BooleanOutputParser()
_DATE = DateOutputParser()
_TIME = TimeOutputParser()
_DATETIME = DateTimeOutputParser()

_BY_NAME: dict[str, OutputParser] = {
    "byte": _BYTE,
    "short": _SHORT,
    "int": _INTEGER,
    "integer": _INTEGER,
    "long": _LONG,
    "biginteger": _BIG_INTEGER,
    "big integer": _BIG_INTEGER,
    "float": _FLOAT,
    "double": _DOUBLE,
    "decimal": _DECIMAL,
    "bool": _BOOLEAN,
    "boolean": _BOOLEAN,
    "date": _DATE,
    "time": _TIME,
    "datetime": _DATETIME,
}

_BY_TYPE: dict[type, OutputParser] = {
    bool: _BOOLEAN,
    int: _BIG_INTEGER,
    float: _DOUBLE,
    Decimal: _DECIMAL,
    date: _DATE,
    time: _TIME,
    datetime: _DATETIME,
}

_COLLECTIONS: dict[Any, type[OutputParser]] = {
    list: ListOutputParser,
    set: SetOutputParser,
    frozenset: SetOutputParser,
}


def create_output_parser(target: Any) -> OutputParser:
    """Create an output parser for a target type.

    Args:
        target: A type identifier such as ``"short"``, a Python type
            (``int``, ``date``, an Enum or BaseModel subclass), or a
            ``list[X]`` / ``set[X]`` of any of those.

    Returns:
        An OutputParser for the target. Scalar parsers are shared singletons.

    Raises:
        ValueError: If the target type is unsupported.

    Example:
        >>> parser = create_output_parser("short")
        >>> parser.format_instructions()
        'integer number in range [-32768, 32767]'
        >>> parser.parse(" -17 ")
        -17
    """
    origin = get_origin(target)
    collection = _COLLECTIONS.get(origin)
    if collection is not None:
        args = get_args(target)
        if len(args) == 1:
            element_parser = create_output_parser(args[0])
            # Set elements must be hashable; pydantic models are not
            if not (
                collection is SetOutputParser
                and isinstance(element_parser, ModelOutputParser)
            ):
                return collection(element_parser)

    elif isinstance(target, str):
        parser = _BY_NAME.get(target.strip().lower())
        if parser is not None:
            return parser

    elif origin is None and isinstance(target, type):
        if target in _BY_TYPE:
            return _BY_TYPE[target]
        if issubclass(target, Enum):
            return EnumOutputParser(target)
        if issubclass(target, BaseModel):
            return ModelOutputParser(target)

    logger.error("Unsupported output type: %r", target)
    raise ValueError(f"Unsupported output type: {target!r}")
