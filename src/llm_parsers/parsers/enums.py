# src/llm_parsers/parsers/enums.py

from enum import Enum
from typing import TypeVar

from .base import OutputParser
from .errors import FormatErrorReason

E = TypeVar("E", bound=Enum)


class EnumOutputParser(OutputParser[E]):
    """Maps a member name onto an Enum member.

    Exact name match first, then case-insensitive. Surrounding brackets are
    ignored since models tend to echo the bracketed list they were given.
    """

    def __init__(self, enum_type: type[E]) -> None:
        members = list(enum_type)
        if not members:
            raise ValueError(f"Enum '{enum_type.__name__}' has no members")

        self.enum_type = enum_type
        self.type_name = enum_type.__name__
        self._by_name = {m.name: m for m in members}
        self._by_folded_name = {m.name.casefold(): m for m in reversed(members)}
        self._instructions = "one of [" + ", ".join(m.name for m in members) + "]"

    def parse(self, text: str) -> E:
        name = text.strip().strip("[]").strip()

        member = self._by_name.get(name)
        if member is None:
            member = self._by_folded_name.get(name.casefold())
        if member is None:
            raise self._fail(
                text,
                FormatErrorReason.UNKNOWN_VALUE,
                f"expected {self._instructions}",
            )
        return member

    def format_instructions(self) -> str:
        return self._instructions
