"""JSON payload decoder backed by pydantic."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from result import Err, Ok, Result

from pawfetch.common import create_logger
from pawfetch.utils.validation import format_validation_error

from .keys import apply_key_strategy
from .models import DecodingError, KeyDecodingStrategy

logger = create_logger("decoding.json")


class JsonPayloadDecoder:
    """Decodes JSON bytes into any type pydantic can validate.

    One instance serves every target type: models, TypedDicts, lists and
    plain builtins all go through the same ``TypeAdapter`` path.
    """

    def __init__(
        self,
        key_strategy: KeyDecodingStrategy = KeyDecodingStrategy.USE_DEFAULT_KEYS,
        *,
        strict: bool = False,
    ) -> None:
        self._key_strategy = key_strategy
        self._strict = strict

    def decode[T](self, payload: bytes, target: type[T]) -> Result[T, DecodingError]:
        target_name = _describe(target)

        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            logger.debug("Payload is not valid JSON", target=target_name, error=str(exc))
            return Err(DecodingError(target=target_name, message=f"Invalid JSON payload: {exc}"))

        try:
            adapter = _adapter_for(target)
        except (TypeError, PydanticSchemaGenerationError) as exc:
            logger.warning("Target type cannot be decoded into", target=target_name, error=str(exc))
            return Err(DecodingError(target=target_name, message=f"Unsupported target type: {exc}"))

        try:
            value = adapter.validate_python(apply_key_strategy(data, self._key_strategy), strict=self._strict)
        except ValidationError as exc:
            logger.debug("Payload does not match target type", target=target_name, errors=exc.error_count())
            return Err(DecodingError(target=target_name, message=format_validation_error(target_name, exc)))
        except RecursionError:
            logger.debug("Payload is nested too deeply", target=target_name)
            return Err(DecodingError(target=target_name, message="Payload is nested too deeply to decode"))

        return Ok(value)


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter[Any]:  # noqa: ANN401
    return TypeAdapter(target)


def _describe(target: object) -> str:
    return target.__name__ if isinstance(target, type) else str(target)
