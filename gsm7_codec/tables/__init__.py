"""
Character Tables
================
GSM 03.38 base and extension alphabets and their lookup structures.
"""

from .alphabet import BASE_TABLE, EXTENSION_TABLE, ESCAPE
from .charset import CharacterTables, Code, CodeKind, build_tables, get_tables

__all__ = [
    "BASE_TABLE",
    "EXTENSION_TABLE",
    "ESCAPE",
    "CharacterTables",
    "Code",
    "CodeKind",
    "build_tables",
    "get_tables",
]
