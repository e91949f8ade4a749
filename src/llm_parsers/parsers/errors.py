# src/llm_parsers/parsers/errors.py

from enum import Enum


class FormatErrorReason(str, Enum):
    """Why a piece of model output was rejected."""

    NOT_A_NUMBER = "not a number"
    OUT_OF_RANGE = "out of range"
    INVALID_FORMAT = "invalid format"
    UNKNOWN_VALUE = "unknown value"


class FormatError(ValueError):
    """Model output does not conform to the target type's grammar or range.

    Carries enough context for the caller to decide whether to ask the
    model again with corrective feedback. Parsers never retry or default.
    """

    def __init__(
        self,
        text: str,
        target_type: str,
        reason: FormatErrorReason,
        detail: str | None = None,
    ) -> None:
        self.text = text
        self.target_type = target_type
        self.reason = reason
        self.detail = detail

        message = f"Cannot parse {text!r} as {target_type}: {reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
