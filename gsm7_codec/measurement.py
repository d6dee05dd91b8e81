"""
Measurement
===========
Encoded length estimation and compatibility checks.
"""

from .exceptions import UnsupportedCharacterError
from .tables import get_tables


def encoded_len(text: str) -> int:
    """
    Calculate the number of bytes required to encode a string in GSM 7-bit.

    Always uses strict semantics; nothing is substituted.

    Args:
        text: Text to measure

    Returns:
        Number of bytes `encode` would produce

    Raises:
        UnsupportedCharacterError: On the first unmapped character
    """
    tables = get_tables()
    length = 0
    for char in text:
        code = tables.code_for(char)
        if code is None:
            raise UnsupportedCharacterError(char)
        length += code.width
    return length


def is_gsm7_compatible(text: str) -> bool:
    """Check if a string can be encoded in GSM 7-bit without substitution."""
    try:
        encoded_len(text)
    except UnsupportedCharacterError:
        return False
    return True
