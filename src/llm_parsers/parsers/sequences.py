# src/llm_parsers/parsers/sequences.py

from typing import TypeVar

from .base import OutputParser

T = TypeVar("T")

_ONE_PER_LINE = "\nYou must put every item on a separate line."


class ListOutputParser(OutputParser[list[T]]):
    """One element per line, parsed by the element parser.

    Blank lines are skipped. Element errors propagate unchanged.
    """

    def __init__(self, element_parser: OutputParser[T]) -> None:
        self.element_parser = element_parser
        self.type_name = f"list of {element_parser.type_name}"

    def parse(self, text: str) -> list[T]:
        return [self.element_parser.parse(line) for line in _items(text)]

    def format_instructions(self) -> str:
        return self.element_parser.format_instructions() + _ONE_PER_LINE


class SetOutputParser(OutputParser[set[T]]):
    def __init__(self, element_parser: OutputParser[T]) -> None:
        self.element_parser = element_parser
        self.type_name = f"set of {element_parser.type_name}"

    def parse(self, text: str) -> set[T]:
        return {self.element_parser.parse(line) for line in _items(text)}

    def format_instructions(self) -> str:
        return self.element_parser.format_instructions() + _ONE_PER_LINE


def _items(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]
