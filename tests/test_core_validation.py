"""Tests for core.validation: algorithm, cut length and uppercase span checks."""

from __future__ import annotations

import pytest

from passcraft.core.types import EffectiveConfig
from passcraft.core.validation import (
    Finding,
    InvalidConfigError,
    ensure_valid,
    validate_config,
)


def test_accepts_valid(valid_config: EffectiveConfig) -> None:
    assert validate_config(valid_config) is None


def test_accepts_defaults() -> None:
    assert validate_config(EffectiveConfig()) is None


@pytest.mark.parametrize("method", ["md5", "Sha1", "sha256", "SHA512"])
def test_method_case_insensitive(valid_config: EffectiveConfig, method: str) -> None:
    assert validate_config(valid_config.model_copy(update={"method": method})) is None


@pytest.mark.parametrize(
    ("update", "check"),
    [
        ({"method": "FOO"}, "method"),
        ({"method": ""}, "method"),
        ({"cut_length": 0}, "cut_length_range"),
        ({"cut_length": 65}, "cut_length_range"),
        ({"upper_start": 9}, "upper_start_span"),
    ],
)
def test_rejects(valid_config: EffectiveConfig, update: dict, check: str) -> None:
    finding = validate_config(valid_config.model_copy(update=update))
    assert finding is not None
    assert finding.check == check


def test_boundaries_accepted(valid_config: EffectiveConfig) -> None:
    low = valid_config.model_copy(update={"cut_length": 1, "upper_start": 1})
    high = valid_config.model_copy(update={"cut_length": 64, "upper_start": 64})
    assert validate_config(low) is None
    assert validate_config(high) is None


def test_first_violation_wins(valid_config: EffectiveConfig) -> None:
    bad = valid_config.model_copy(update={"method": "FOO", "cut_length": 0, "upper_start": 5})
    finding = validate_config(bad)
    assert finding is not None
    assert finding.message == "Unsupported hash algorithm: FOO"


def test_messages(valid_config: EffectiveConfig) -> None:
    cut = validate_config(valid_config.model_copy(update={"cut_length": 65}))
    span = validate_config(valid_config.model_copy(update={"upper_start": 10}))
    assert cut is not None and cut.message == "Cut length must be between 1-64"
    assert span is not None and span.message == "Upper start position cannot exceed cut length"


def test_validation_does_not_mutate(valid_config: EffectiveConfig) -> None:
    bad = valid_config.model_copy(update={"cut_length": 0})
    before = bad.model_dump()
    validate_config(bad)
    assert bad.model_dump() == before


def test_ensure_valid_raises_with_finding(valid_config: EffectiveConfig) -> None:
    bad = valid_config.model_copy(update={"cut_length": 0})
    with pytest.raises(InvalidConfigError) as exc_info:
        ensure_valid(bad)
    assert isinstance(exc_info.value.finding, Finding)
    assert exc_info.value.finding.field == "cut_length"


def test_ensure_valid_returns_config(valid_config: EffectiveConfig) -> None:
    assert ensure_valid(valid_config) is valid_config
