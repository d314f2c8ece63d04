"""Core data contracts: supported hash methods and the effective configuration."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from pydantic import BaseModel, Field

from passcraft.core.defaults import (
    DEFAULT_CUT_LENGTH,
    DEFAULT_END_CHAR,
    DEFAULT_METHOD,
    DEFAULT_UPPER_START,
)


class HashMethod(StrEnum):
    """Digest algorithms accepted by the formatter.

    Member values are the canonical uppercase spellings; lookups from
    user input go through :meth:`parse` so they are case-insensitive.
    """

    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @classmethod
    def parse(cls, value: str) -> HashMethod:
        """Case-insensitive lookup.  Raises ``ValueError`` for unknown names."""
        return cls(value.strip().upper())


DIGEST_LENGTHS: Final[dict[HashMethod, int]] = {
    HashMethod.MD5: 32,
    HashMethod.SHA1: 40,
    HashMethod.SHA256: 64,
    HashMethod.SHA512: 128,
}


class EffectiveConfig(BaseModel, frozen=True):
    """Fully resolved settings driving one hash-formatting run.

    Instances are immutable; configuration sources produce new instances
    via ``model_copy(update=...)``.  Nothing here is range-checked at
    construction -- see :func:`passcraft.core.validation.validate_config`.
    """

    # -- hash parameters --
    method: str = Field(default=DEFAULT_METHOD, description="Digest algorithm name (uppercase).")
    cut_length: int = Field(default=DEFAULT_CUT_LENGTH, description="Leading hex characters kept.")
    end_char: str = Field(default=DEFAULT_END_CHAR, description="First char replaces the last kept char.")
    upper_start: int = Field(default=DEFAULT_UPPER_START, description="Leading characters forced to uppercase.")

    # -- identity --
    name: str = ""
    email: str = ""
    site: str = ""

    # -- files --
    input_file: str | None = None
    output_file: str | None = None


def default_config() -> EffectiveConfig:
    """Return a configuration carrying only the built-in defaults."""
    return EffectiveConfig()
