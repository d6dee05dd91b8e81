"""
GSM 7-bit Encoder
=================
Text to GSM 03.38 byte sequence conversion.
"""

from typing import Optional
import structlog

from .config import DEFAULT_CONFIG, Gsm7Config
from .exceptions import MalformedDataError, UnsupportedCharacterError
from .tables import get_tables

logger = structlog.get_logger(__name__)

# Terminal fallback when even the replacement character is unmapped
FALLBACK_BYTE = 0x20


def encode(text: str) -> bytes:
    """
    Encode text using the default (non-strict) configuration.

    Args:
        text: Text to encode

    Returns:
        GSM 7-bit bytes, one per septet (not packed)
    """
    return encode_with_config(text, DEFAULT_CONFIG)


def encode_with_config(text: str, config: Optional[Gsm7Config] = None) -> bytes:
    """
    Encode text using GSM 7-bit encoding with custom configuration.

    Args:
        text: Text to encode
        config: Configuration options

    Returns:
        GSM 7-bit bytes

    Raises:
        MalformedDataError: If the text is longer than config.max_input_length
        UnsupportedCharacterError: In strict mode, on the first unmapped character
    """
    if not isinstance(text, str):
        raise TypeError(f"GSM 7-bit encoding expects str, got {type(text).__name__}")
    config = config or DEFAULT_CONFIG

    if config.exceeds_limit(len(text)):
        logger.debug(
            "encode_length_exceeded",
            length=len(text),
            max_input_length=config.max_input_length,
        )
        raise MalformedDataError.length_exceeded(len(text), config.max_input_length)

    tables = get_tables()
    out = bytearray()

    for char in text:
        code = tables.code_for(char)
        if code is None:
            if config.strict:
                logger.debug("unsupported_character", code_point=ord(char))
                raise UnsupportedCharacterError(char)
            code = tables.code_for(config.replacement_char)
            if code is None:
                out.append(FALLBACK_BYTE)
                continue
        out += code.to_bytes()

    return bytes(out)
