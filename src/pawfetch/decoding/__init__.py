"""Payload decoders: raw bytes to typed values."""

from .json_decoder import JsonPayloadDecoder
from .keys import camel_to_snake
from .models import DecodingError, KeyDecodingStrategy
from .protocol import PayloadDecoder

__all__ = [
    "DecodingError",
    "JsonPayloadDecoder",
    "KeyDecodingStrategy",
    "PayloadDecoder",
    "camel_to_snake",
]
