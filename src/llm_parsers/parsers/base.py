# src/llm_parsers/parsers/base.py

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .errors import FormatError, FormatErrorReason

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OutputParser(ABC, Generic[T]):
    """Converts raw model output into a value of one target type.

    Design principles:
    - Stateless: Safe to share and call concurrently
    - Strict: Malformed or out-of-range input raises FormatError
    - No behavior: No retries, no defaults, no prompt fixing
    """

    #: Short name of the target type, reported in FormatError.
    type_name: str = "value"

    @abstractmethod
    def parse(self, text: str) -> T:
        """Parse model output into the target type.

        Args:
            text: Raw model output. Surrounding whitespace is tolerated.

        Returns:
            The parsed value.

        Raises:
            FormatError: If the text does not conform to the target type.
        """
        raise NotImplementedError

    @abstractmethod
    def format_instructions(self) -> str:
        """Static description of the accepted format, for the prompt.

        The wording is part of the contract with already-tuned prompts
        and must not change between calls.
        """
        raise NotImplementedError

    def _fail(
        self,
        text: str,
        reason: FormatErrorReason,
        detail: str | None = None,
    ) -> FormatError:
        logger.debug(
            "Rejected model output as %s: reason=%s, text=%r",
            self.type_name,
            reason.value,
            text,
        )
        return FormatError(text, self.type_name, reason, detail)
