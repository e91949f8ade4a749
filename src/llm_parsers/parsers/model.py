# src/llm_parsers/parsers/model.py

import json
import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .base import OutputParser
from .errors import FormatErrorReason

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ModelOutputParser(OutputParser[M]):
    """JSON object validated against a Pydantic model.

    The JSON is taken from the first ``{`` to the last ``}``, so prose or
    code fences around the object are tolerated.
    """

    def __init__(self, model_type: type[M]) -> None:
        if not (isinstance(model_type, type) and issubclass(model_type, BaseModel)):
            raise TypeError(f"Expected a pydantic BaseModel subclass, got {model_type!r}")

        self.model_type = model_type
        self.type_name = model_type.__name__
        # Computed once: the schema is static per model type
        self._instructions = (
            "JSON object matching the following schema:\n"
            + json.dumps(model_type.model_json_schema(), indent=2)
        )
        logger.debug("Initialized ModelOutputParser for %s", self.type_name)

    def parse(self, text: str) -> M:
        start = text.find("{")
        end = text.rfind("}")
        if start == -1 or end < start:
            raise self._fail(text, FormatErrorReason.INVALID_FORMAT, "no JSON object found")

        try:
            return self.model_type.model_validate_json(text[start : end + 1])
        except ValidationError as exc:
            raise self._fail(
                text,
                FormatErrorReason.INVALID_FORMAT,
                f"{exc.error_count()} validation error(s)",
            ) from exc

    def format_instructions(self) -> str:
        return self._instructions
