"""Digest computation and the password formatting pipeline.

The pipeline is: base text -> hex digest -> truncate -> end-character
substitution -> leading uppercase span -> ``name,<token>,site``.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Any, Callable, Final

from passcraft.core.types import EffectiveConfig, HashMethod
from passcraft.core.validation import ensure_valid

logger = logging.getLogger(__name__)

_HASHERS: Final[dict[HashMethod, Callable[[bytes], Any]]] = {
    HashMethod.MD5: hashlib.md5,
    HashMethod.SHA1: hashlib.sha1,
    HashMethod.SHA256: hashlib.sha256,
    HashMethod.SHA512: hashlib.sha512,
}

_FIELD_SEPARATOR: Final[str] = ","


class UnsupportedHashMethodError(ValueError):
    """Raised when a digest is requested for an algorithm outside :class:`HashMethod`."""


def get_string_hash(text: str, method: str) -> str:
    """Lowercase hex digest of the UTF-8 bytes of *text*.

    Args:
        text: Payload to hash.
        method: Algorithm name, case-insensitive (``md5``, ``SHA256``, ...).

    Returns:
        Hex digest; 32, 40, 64 or 128 characters depending on *method*.

    Raises:
        UnsupportedHashMethodError: If *method* is not a :class:`HashMethod`.
    """
    try:
        hash_method = HashMethod.parse(method)
    except ValueError:
        raise UnsupportedHashMethodError(f"Unsupported hash algorithm: {method}") from None
    return _HASHERS[hash_method](text.encode("utf-8")).hexdigest()


def build_base_text(config: EffectiveConfig) -> str:
    """Join ``name``, ``email`` and ``site`` with literal commas.

    No escaping is applied: a comma inside a field is indistinguishable
    from a separator.
    """
    return _FIELD_SEPARATOR.join((config.name, config.email, config.site))


def format_hash(
    digest: str,
    *,
    cut_length: int,
    end_char: str,
    upper_start: int,
) -> str:
    """Apply truncation, end-character substitution and the uppercase span.

    Args:
        digest: Lowercase hex digest.
        cut_length: Number of leading characters to keep.
        end_char: If non-empty, its first character replaces the last kept
            character.
        upper_start: Number of leading characters to uppercase.  Ignored
            when it exceeds the truncated length (e.g. MD5 cut to 40).

    Returns:
        The formatted token.
    """
    token = digest[:min(cut_length, len(digest))]

    if end_char and token:
        token = token[:-1] + end_char[0]

    if upper_start <= len(token):
        token = token[:upper_start].upper() + token[upper_start:]

    return token


def format_password(config: EffectiveConfig) -> str:
    """Produce ``name,<token>,site`` for a validated *config*.

    The email participates in the digest but is not echoed in the result.

    Raises:
        InvalidConfigError: If *config* fails validation.
    """
    ensure_valid(config)

    base_text = build_base_text(config)
    logger.debug("base_text=%r", base_text)

    digest = get_string_hash(base_text, config.method)
    logger.debug("method=%s digest=%s", config.method, digest)

    token = format_hash(
        digest,
        cut_length=config.cut_length,
        end_char=config.end_char,
        upper_start=config.upper_start,
    )
    logger.debug(
        "Formatted token: cut=%d end=%r upper_start=%d",
        config.cut_length, config.end_char[:1], config.upper_start,
    )

    return _FIELD_SEPARATOR.join((config.name, token, config.site))
