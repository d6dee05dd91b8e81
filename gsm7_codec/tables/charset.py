"""
Character Tables
================
Immutable lookup structures derived from the GSM 03.38 alphabet.

The tables are built once per process on first use and shared read-only
by every encode and decode call.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
import structlog

from .alphabet import BASE_TABLE, ESCAPE, EXTENSION_TABLE

logger = structlog.get_logger(__name__)


class CodeKind(str, Enum):
    """How a character is represented on the wire."""
    SINGLE = "single"  # One byte
    ESCAPE = "escape"  # ESCAPE followed by one byte


@dataclass(frozen=True)
class Code:
    """GSM 7-bit code for a single character."""
    kind: CodeKind
    value: int

    @property
    def width(self) -> int:
        """Number of output bytes."""
        return 2 if self.kind == CodeKind.ESCAPE else 1

    def to_bytes(self) -> bytes:
        if self.kind == CodeKind.ESCAPE:
            return bytes((ESCAPE, self.value))
        return bytes((self.value,))


@dataclass(frozen=True)
class CharacterTables:
    """
    Read-only character tables.

    Attributes:
        char_to_code: Inverse index, character to Code
        base: 128 slots of optional characters indexed by code
        extension: Sparse suffix byte to character map
    """
    char_to_code: Mapping[str, Code]
    base: Tuple[Optional[str], ...]
    extension: Mapping[int, str]

    def code_for(self, char: str) -> Optional[Code]:
        """Get the Code for a character, or None if unmapped."""
        return self.char_to_code.get(char)

    def base_char(self, byte: int) -> Optional[str]:
        """Get the base table character for a byte 0x00-0x7F."""
        if 0 <= byte < len(self.base):
            return self.base[byte]
        return None

    def extension_char(self, suffix: int) -> Optional[str]:
        """Get the extension table character for an escape suffix."""
        return self.extension.get(suffix)


def build_tables() -> CharacterTables:
    """
    Build the character tables from the declarative alphabet.

    Base entries are indexed first; extension entries never overwrite
    them, so a character reachable both ways keeps its single-byte code.

    Returns:
        Freshly built CharacterTables
    """
    char_to_code: Dict[str, Code] = {}
    base: List[Optional[str]] = [None] * 128
    extension: Dict[int, str] = {}

    for code, char in BASE_TABLE:
        if char is None:
            continue
        char_to_code[char] = Code(CodeKind.SINGLE, code)
        base[code] = char

    for suffix, char in EXTENSION_TABLE:
        char_to_code.setdefault(char, Code(CodeKind.ESCAPE, suffix))
        extension[suffix] = char

    return CharacterTables(
        char_to_code=MappingProxyType(char_to_code),
        base=tuple(base),
        extension=MappingProxyType(extension),
    )


# Process-wide tables, built on first use
_tables: Optional[CharacterTables] = None
_tables_lock = threading.Lock()


def get_tables() -> CharacterTables:
    """
    Get the shared character tables, building them on first call.

    Concurrent first calls build the tables exactly once.
    """
    global _tables
    if _tables is None:
        with _tables_lock:
            if _tables is None:
                _tables = build_tables()
                logger.debug(
                    "character_tables_built",
                    base_entries=sum(1 for c in _tables.base if c is not None),
                    extension_entries=len(_tables.extension),
                )
    return _tables
