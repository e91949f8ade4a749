# src/llm_parsers/parsers/boolean.py

from .base import OutputParser
from .errors import FormatErrorReason

_LITERALS = {"true": True, "false": False}


class BooleanOutputParser(OutputParser[bool]):
    """Strict ``true`` / ``false`` literals, case-insensitive.

    Unlike ``bool(text)``, anything other than the two literals is rejected.
    """

    type_name = "boolean"

    def parse(self, text: str) -> bool:
        try:
            return _LITERALS[text.strip().lower()]
        except KeyError:
            raise self._fail(text, FormatErrorReason.INVALID_FORMAT) from None

    def format_instructions(self) -> str:
        return "one of [true, false]"
