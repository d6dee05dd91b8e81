"""
Codec Registration
==================
Exposes the GSM 03.38 codec through Python's `codecs` registry.

Usage:
    import gsm7_codec

    "Hello {world}".encode("gsm0338")
    b"\\x1be".decode("gsm0338")
"""

import codecs
import threading
from typing import Optional, Tuple

from .config import Gsm7Config
from .decoder import SymbolKind, decode_with_config, scan
from .encoder import encode_with_config
from .exceptions import UnsupportedCharacterError
from .tables import get_tables

CODEC_NAME = "gsm0338"
CODEC_ALIASES = frozenset({
    "gsm0338", "gsm03.38", "gsm03_38", "gsm_03_38", "gsm_03.38", "gsm7", "gsm_7",
})

_STRICT = Gsm7Config.strict_mode()
_REPLACE = Gsm7Config.lenient("?")

_registered = False
_register_lock = threading.Lock()


def _config_for(errors: str) -> Gsm7Config:
    if errors == "strict":
        return _STRICT
    if errors == "replace":
        return _REPLACE
    raise ValueError(f"Unsupported error handling for {CODEC_NAME}: {errors!r}")


def _ignore_encode(text: str) -> bytes:
    tables = get_tables()
    codes = (tables.code_for(char) for char in text)
    return b"".join(code.to_bytes() for code in codes if code is not None)


def _ignore_decode(raw: bytes) -> str:
    return "".join(
        symbol.char for symbol in scan(raw, get_tables())
        if symbol.kind == SymbolKind.CHARACTER
    )


def gsm_encode(text: str, errors: str = "strict") -> Tuple[bytes, int]:
    """codecs-style encode returning (output, consumed)."""
    if errors == "ignore":
        return _ignore_encode(text), len(text)
    config = _config_for(errors)
    try:
        return encode_with_config(text, config), len(text)
    except UnsupportedCharacterError as exc:
        tables = get_tables()
        position = next(i for i, c in enumerate(text) if tables.code_for(c) is None)
        raise UnicodeEncodeError(
            CODEC_NAME, text, position, position + 1, str(exc)
        ) from exc


def gsm_decode(data: bytes, errors: str = "strict") -> Tuple[str, int]:
    """codecs-style decode returning (output, consumed)."""
    raw = bytes(data)
    if errors == "ignore":
        return _ignore_decode(raw), len(raw)
    config = _config_for(errors)
    if config.strict:
        for symbol in scan(raw, get_tables()):
            error = symbol.error
            if error is not None:
                width = 2 if symbol.kind == SymbolKind.INVALID_ESCAPE else 1
                raise UnicodeDecodeError(
                    CODEC_NAME, raw, symbol.offset, symbol.offset + width, str(error)
                ) from error
    return decode_with_config(raw, config), len(raw)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input, final=False):
        return gsm_encode(input, self.errors)[0]


class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
    """Holds back a trailing escape byte until the next chunk arrives."""

    def _buffer_decode(self, input, errors, final):
        raw = bytes(input)
        if not final and _ends_with_pending_escape(raw):
            text, _ = gsm_decode(raw[:-1], errors)
            return text, len(raw) - 1
        return gsm_decode(raw, errors)


def _ends_with_pending_escape(raw: bytes) -> bool:
    last = None
    for last in scan(raw, get_tables()):
        pass
    return last is not None and last.kind == SymbolKind.ESCAPE_AT_END


def search_function(name: str) -> Optional[codecs.CodecInfo]:
    """Codec search function answering the GSM 03.38 names."""
    normalized = name.lower().replace("-", "_").replace(" ", "_")
    if normalized not in CODEC_ALIASES:
        return None
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=gsm_encode,
        decode=gsm_decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
    )


def register() -> None:
    """Register the codec with `codecs`. Safe to call more than once."""
    global _registered
    if _registered:
        return
    with _register_lock:
        if not _registered:
            codecs.register(search_function)
            _registered = True
