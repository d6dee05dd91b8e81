"""
Codec Exceptions
================
Exception classes for GSM 7-bit encoding and decoding.
"""

from enum import Enum
from typing import Any, Dict


class Gsm7ErrorKind(str, Enum):
    """Closed set of codec error kinds."""
    UNSUPPORTED_CHARACTER = "unsupported_character"
    INVALID_ESCAPE_SEQUENCE = "invalid_escape_sequence"
    INVALID_BYTE = "invalid_byte"
    MALFORMED_DATA = "malformed_data"


class Gsm7Error(ValueError):
    """Base exception for all GSM 7-bit codec errors."""
    kind: Gsm7ErrorKind

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for logging."""
        return {"kind": self.kind.value, "message": str(self)}


class UnsupportedCharacterError(Gsm7Error):
    """Raised when a character has no GSM 7-bit code."""
    kind = Gsm7ErrorKind.UNSUPPORTED_CHARACTER

    def __init__(self, character: str):
        self.character = character
        self.code_point = ord(character)
        super().__init__(
            f"Character not supported in GSM 7-bit: '{character}' "
            f"(U+{self.code_point:04X})"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["code_point"] = self.code_point
        return data


class InvalidEscapeSequenceError(Gsm7Error):
    """Raised when an escape prefix is followed by an unknown suffix."""
    kind = Gsm7ErrorKind.INVALID_ESCAPE_SEQUENCE

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Invalid escape sequence: 0x1B followed by 0x{code:02X}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["code"] = self.code
        return data


class InvalidByteError(Gsm7Error):
    """Raised when a byte in 0x00-0x7F has no base table character."""
    kind = Gsm7ErrorKind.INVALID_BYTE

    def __init__(self, byte: int):
        self.byte = byte
        super().__init__(f"Invalid GSM 7-bit byte: 0x{byte:02X}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["byte"] = self.byte
        return data


class MalformedDataError(Gsm7Error):
    """Raised for structural problems: trailing escape or oversized input."""
    kind = Gsm7ErrorKind.MALFORMED_DATA

    ESCAPE_AT_END = "Escape byte at end of input"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed GSM 7-bit data: {reason}")

    @classmethod
    def length_exceeded(cls, length: int, maximum: int) -> "MalformedDataError":
        return cls(f"Input length {length} exceeds maximum of {maximum}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["reason"] = self.reason
        return data
