"""
GSM 7-bit Decoder
=================
GSM 03.38 byte sequence to text conversion.

Decoding is a single left-to-right scan driven by a two-state machine:

    PLAIN           --0x1B-->        ESCAPE_PENDING
    PLAIN           --other byte-->  PLAIN           (base table lookup)
    ESCAPE_PENDING  --any byte-->    PLAIN           (extension table lookup)
    ESCAPE_PENDING  --end of input-> trailing escape

The scanner only classifies bytes. Policy (emit, substitute or raise) is
applied by `decode_with_config` and `validate_encoded_data` from the same
classification, so the validation pass always agrees with the main pass.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Union
import structlog

from .config import DEFAULT_CONFIG, Gsm7Config
from .exceptions import (
    Gsm7Error,
    InvalidByteError,
    InvalidEscapeSequenceError,
    MalformedDataError,
)
from .tables import ESCAPE, CharacterTables, get_tables

logger = structlog.get_logger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class DecoderState(str, Enum):
    """Scanner states."""
    PLAIN = "plain"
    ESCAPE_PENDING = "escape_pending"


class SymbolKind(str, Enum):
    """Classification of one decoded symbol."""
    CHARACTER = "character"
    INVALID_ESCAPE = "invalid_escape"
    ESCAPE_AT_END = "escape_at_end"
    INVALID_BYTE = "invalid_byte"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class Symbol:
    """One classified input symbol (1 or 2 bytes)."""
    kind: SymbolKind
    offset: int
    char: Optional[str] = None
    code: Optional[int] = None

    @property
    def error(self) -> Optional[Gsm7Error]:
        """The strict-mode error for this symbol, if any."""
        if self.kind == SymbolKind.INVALID_ESCAPE:
            return InvalidEscapeSequenceError(self.code)
        if self.kind == SymbolKind.ESCAPE_AT_END:
            return MalformedDataError(MalformedDataError.ESCAPE_AT_END)
        if self.kind == SymbolKind.INVALID_BYTE:
            return InvalidByteError(self.code)
        # Bytes >= 0x80 are always tolerated
        return None


def scan(data: bytes, tables: CharacterTables) -> Iterator[Symbol]:
    """
    Classify `data` symbol by symbol.

    Args:
        data: GSM 7-bit bytes
        tables: Character tables to resolve against

    Yields:
        One Symbol per decoded character position
    """
    state = DecoderState.PLAIN
    for offset, byte in enumerate(data):
        if state == DecoderState.ESCAPE_PENDING:
            state = DecoderState.PLAIN
            char = tables.extension_char(byte)
            if char is None:
                yield Symbol(SymbolKind.INVALID_ESCAPE, offset - 1, code=byte)
            else:
                yield Symbol(SymbolKind.CHARACTER, offset - 1, char=char)
        elif byte == ESCAPE:
            state = DecoderState.ESCAPE_PENDING
        elif byte < 0x80:
            char = tables.base_char(byte)
            if char is None:
                yield Symbol(SymbolKind.INVALID_BYTE, offset, code=byte)
            else:
                yield Symbol(SymbolKind.CHARACTER, offset, char=char)
        else:
            yield Symbol(SymbolKind.OUT_OF_RANGE, offset, code=byte)

    if state == DecoderState.ESCAPE_PENDING:
        yield Symbol(SymbolKind.ESCAPE_AT_END, len(data) - 1, code=ESCAPE)


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        raise TypeError("GSM 7-bit decoding expects bytes, got str")
    if isinstance(data, int):
        raise TypeError("GSM 7-bit decoding expects bytes, got int")
    return bytes(data)


def _check_length(data: bytes, config: Gsm7Config) -> None:
    if config.exceeds_limit(len(data)):
        logger.debug(
            "decode_length_exceeded",
            length=len(data),
            max_input_length=config.max_input_length,
        )
        raise MalformedDataError.length_exceeded(len(data), config.max_input_length)


def validate_encoded_data(data: BytesLike, strict: bool = True) -> None:
    """
    Validate GSM 7-bit data without decoding it.

    In strict mode this rejects exactly what a strict decode rejects.
    Otherwise only a trailing escape byte is rejected. Bytes >= 0x80 are
    never rejected.

    Raises:
        Gsm7Error: The first problem found
    """
    raw = _as_bytes(data)
    for symbol in scan(raw, get_tables()):
        if not strict and symbol.kind != SymbolKind.ESCAPE_AT_END:
            continue
        error = symbol.error
        if error is not None:
            logger.debug("validation_failed", offset=symbol.offset, **error.to_dict())
            raise error


def decode(data: BytesLike) -> str:
    """
    Decode GSM 7-bit bytes using the default (non-strict) configuration.

    Invalid bytes are replaced with U+FFFD.
    """
    return decode_with_config(data, DEFAULT_CONFIG)


def decode_with_config(data: BytesLike, config: Optional[Gsm7Config] = None) -> str:
    """
    Decode GSM 7-bit bytes with custom configuration.

    Args:
        data: GSM 7-bit bytes (one septet per byte, not packed)
        config: Configuration options

    Returns:
        Decoded text

    Raises:
        MalformedDataError: Input over the length limit, or trailing escape in strict mode
        InvalidEscapeSequenceError: Unknown escape suffix in strict mode
        InvalidByteError: Unassigned base byte in strict mode
    """
    raw = _as_bytes(data)
    config = config or DEFAULT_CONFIG
    _check_length(raw, config)

    if config.validate_input:
        validate_encoded_data(raw, config.strict)

    chars = []
    for symbol in scan(raw, get_tables()):
        if symbol.kind == SymbolKind.CHARACTER:
            chars.append(symbol.char)
            continue
        error = symbol.error
        if error is not None and config.strict:
            logger.debug("decode_failed", offset=symbol.offset, **error.to_dict())
            raise error
        chars.append(config.replacement_char)

    return "".join(chars)
