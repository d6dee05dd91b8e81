"""
GSM 03.38 Codec
===============
Conversion between Unicode text and the GSM default 7-bit alphabet.
"""

__version__ = "0.1.0"

# Tables
from gsm7_codec.tables import (
    ESCAPE,
    CharacterTables,
    Code,
    CodeKind,
    get_tables,
)

# Configuration
from gsm7_codec.config import Gsm7Config, REPLACEMENT_CHARACTER

# Errors
from gsm7_codec.exceptions import (
    Gsm7Error,
    Gsm7ErrorKind,
    UnsupportedCharacterError,
    InvalidEscapeSequenceError,
    InvalidByteError,
    MalformedDataError,
)

# Encoding / decoding
from gsm7_codec.encoder import encode, encode_with_config
from gsm7_codec.decoder import (
    DecoderState,
    decode,
    decode_with_config,
    validate_encoded_data,
)
from gsm7_codec.measurement import encoded_len, is_gsm7_compatible

# Codec registry
from gsm7_codec.codec import register

# Logging
from gsm7_codec.logging_config import setup_logging

register()

__all__ = [
    # Tables
    "ESCAPE",
    "CharacterTables",
    "Code",
    "CodeKind",
    "get_tables",
    # Configuration
    "Gsm7Config",
    "REPLACEMENT_CHARACTER",
    # Errors
    "Gsm7Error",
    "Gsm7ErrorKind",
    "UnsupportedCharacterError",
    "InvalidEscapeSequenceError",
    "InvalidByteError",
    "MalformedDataError",
    # Encoding / decoding
    "encode",
    "encode_with_config",
    "decode",
    "decode_with_config",
    "validate_encoded_data",
    "DecoderState",
    "encoded_len",
    "is_gsm7_compatible",
    # Codec registry
    "register",
    # Logging
    "setup_logging",
]
