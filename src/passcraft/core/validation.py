"""Configuration validation: algorithm, truncation length, and uppercase span checks."""

from __future__ import annotations

from pydantic import BaseModel

from passcraft.core.defaults import MAX_CUT_LENGTH, MIN_CUT_LENGTH
from passcraft.core.types import EffectiveConfig, HashMethod


class Finding(BaseModel, frozen=True):
    check: str
    field: str
    message: str


class InvalidConfigError(ValueError):
    """Raised when a configuration violates an invariant.

    The violated invariant is available as :attr:`finding`.
    """

    def __init__(self, finding: Finding) -> None:
        super().__init__(finding.message)
        self.finding = finding


def validate_config(config: EffectiveConfig) -> Finding | None:
    """Return the first violated invariant of *config*, or ``None``.

    Checks run in a fixed order:
        * ``method`` is one of :class:`HashMethod` (case-insensitive).
        * ``cut_length`` lies within ``[MIN_CUT_LENGTH, MAX_CUT_LENGTH]``.
        * ``upper_start`` does not exceed ``cut_length``.

    *config* is never mutated.

    Args:
        config: Configuration to check.

    Returns:
        A :class:`Finding` describing the first failure, or ``None`` if
        the configuration is valid.
    """
    for check in (_check_method, _check_cut_length, _check_upper_start):
        finding = check(config)
        if finding is not None:
            return finding
    return None


def ensure_valid(config: EffectiveConfig) -> EffectiveConfig:
    """Raise :class:`InvalidConfigError` unless *config* is valid.  Returns *config*."""
    finding = validate_config(config)
    if finding is not None:
        raise InvalidConfigError(finding)
    return config


def _check_method(config: EffectiveConfig) -> Finding | None:
    try:
        HashMethod.parse(config.method)
    except ValueError:
        return Finding(
            check="method",
            field="method",
            message=f"Unsupported hash algorithm: {config.method}",
        )
    return None


def _check_cut_length(config: EffectiveConfig) -> Finding | None:
    if not MIN_CUT_LENGTH <= config.cut_length <= MAX_CUT_LENGTH:
        return Finding(
            check="cut_length_range",
            field="cut_length",
            message=f"Cut length must be between {MIN_CUT_LENGTH}-{MAX_CUT_LENGTH}",
        )
    return None


def _check_upper_start(config: EffectiveConfig) -> Finding | None:
    if config.upper_start > config.cut_length:
        return Finding(
            check="upper_start_span",
            field="upper_start",
            message="Upper start position cannot exceed cut length",
        )
    return None
