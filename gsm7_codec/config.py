"""
Codec Configuration
===================
Error policy and limits for GSM 7-bit encoding and decoding.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

# Default placeholder for unmapped input
REPLACEMENT_CHARACTER = "\ufffd"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Gsm7Config:
    """Configuration for GSM 7-bit encoding/decoding."""
    strict: bool = False                             # Fail instead of substituting
    replacement_char: str = REPLACEMENT_CHARACTER    # Substitute in non-strict mode
    max_input_length: int = 0                        # 0 = unbounded
    validate_input: bool = False                     # Validation pre-pass on decode

    def __post_init__(self) -> None:
        if not isinstance(self.replacement_char, str) or len(self.replacement_char) != 1:
            raise ValueError(
                f"replacement_char must be a single character, got {self.replacement_char!r}"
            )
        if self.max_input_length < 0:
            raise ValueError(
                f"max_input_length must be >= 0, got {self.max_input_length}"
            )

    @classmethod
    def default(cls) -> "Gsm7Config":
        return cls()

    @classmethod
    def strict_mode(cls) -> "Gsm7Config":
        """Strict mode with all other fields at their defaults."""
        return cls(strict=True)

    @classmethod
    def lenient(cls, replacement_char: str = "?") -> "Gsm7Config":
        """Non-strict mode substituting a GSM-encodable placeholder."""
        return cls(strict=False, replacement_char=replacement_char)

    @classmethod
    def from_env(cls, prefix: str = "GSM7_") -> "Gsm7Config":
        """
        Build a configuration from environment variables.

        Reads {prefix}STRICT, {prefix}REPLACEMENT_CHAR,
        {prefix}MAX_INPUT_LENGTH and {prefix}VALIDATE_INPUT. Unset
        variables keep their defaults.
        """
        replacement: Optional[str] = os.getenv(f"{prefix}REPLACEMENT_CHAR")
        return cls(
            strict=_env_bool(f"{prefix}STRICT", False),
            replacement_char=replacement or REPLACEMENT_CHARACTER,
            max_input_length=int(os.getenv(f"{prefix}MAX_INPUT_LENGTH") or "0"),
            validate_input=_env_bool(f"{prefix}VALIDATE_INPUT", False),
        )

    def with_max_length(self, max_input_length: int) -> "Gsm7Config":
        return replace(self, max_input_length=max_input_length)

    def with_validation(self, enabled: bool = True) -> "Gsm7Config":
        return replace(self, validate_input=enabled)

    def with_replacement(self, replacement_char: str) -> "Gsm7Config":
        return replace(self, replacement_char=replacement_char)

    def exceeds_limit(self, length: int) -> bool:
        """Whether an input of `length` raw units is over the limit."""
        return self.max_input_length > 0 and length > self.max_input_length


DEFAULT_CONFIG = Gsm7Config()
