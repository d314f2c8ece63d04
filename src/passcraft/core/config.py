"""Layered configuration resolution.

Configuration arrives as short key-value strings and an optional config
file.  Each source is a patch applied on top of the previous result, only
touching the fields its grammar recognises::

    defaults < --text < --hash < --slkv < --sslf < --file

Grammars::

    identity list   name:john,email:j@x.org,site:example.com
    hash list       method:sha256,cut:10,end:!,upper-start:3
    combined list   any mix of the two above
    compact form    <identity list>;<hash list>

A config file holds compact-form lines; ``#`` lines and ``<!-- ... -->``
spans are ignored and the last remaining line wins.  A file that yields a
configuration replaces everything resolved from the command line.

Usage::

    from passcraft.core.config import resolve_config

    cfg = resolve_config(text="name:john,site:example.com", hash_params="method:sha256")
    cfg.method       # "SHA256"
    cfg.cut_length   # 8
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Final, Iterator

from passcraft.core.defaults import (
    COMPACT_SEPARATOR,
    DEFAULT_CUT_LENGTH,
    DEFAULT_UPPER_START,
    KEY_VALUE_SEPARATOR,
    PAIR_SEPARATOR,
)
from passcraft.core.types import EffectiveConfig, default_config

logger = logging.getLogger(__name__)

_COMMENT_LINE: Final[re.Pattern[str]] = re.compile(r"^#.*")
_HTML_COMMENT: Final[re.Pattern[str]] = re.compile(r"<!--.*-->")
_COUNT: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")

_IDENTITY_KEYS: Final[frozenset[str]] = frozenset({"name", "email", "site"})

ConfigPatch = Callable[[EffectiveConfig, str], EffectiveConfig]


class ConfigLoadError(OSError):
    """Raised when an existing config file cannot be read or decoded."""


# -- key-value grammar ---------------------------------------------------------

def iter_pairs(text: str) -> Iterator[tuple[str, str]]:
    """Yield stripped ``(key, value)`` pairs from ``k:v,k:v`` text.

    Pieces without a ``:`` are skipped.  Only the first ``:`` splits, so
    values may themselves contain colons (``site:https://x.org``).
    """
    for piece in text.split(PAIR_SEPARATOR):
        key, sep, value = piece.partition(KEY_VALUE_SEPARATOR)
        if sep:
            yield key.strip(), value.strip()


def _parse_count(value: str, fallback: int) -> int:
    if not _COUNT.fullmatch(value):
        return fallback
    return int(value)


def apply_identity_list(config: EffectiveConfig, text: str) -> EffectiveConfig:
    """Apply ``name``/``email``/``site`` keys from *text*; other keys are ignored."""
    updates = {key: value for key, value in iter_pairs(text) if key in _IDENTITY_KEYS}
    return config.model_copy(update=updates) if updates else config


def apply_hash_list(config: EffectiveConfig, text: str) -> EffectiveConfig:
    """Apply ``method``/``cut``/``end``/``upper-start`` keys from *text*.

    Counts must be plain ASCII digits with an optional leading ``+``.
    Anything else falls back to the built-in defaults (8 for ``cut``, 3
    for ``upper-start``) instead of raising.
    """
    updates: dict[str, object] = {}
    for key, value in iter_pairs(text):
        if key == "method":
            updates["method"] = value.upper()
        elif key == "cut":
            updates["cut_length"] = _parse_count(value, DEFAULT_CUT_LENGTH)
        elif key == "end":
            updates["end_char"] = value
        elif key == "upper-start":
            updates["upper_start"] = _parse_count(value, DEFAULT_UPPER_START)
    return config.model_copy(update=updates) if updates else config


def apply_combined_list(config: EffectiveConfig, text: str) -> EffectiveConfig:
    """Run the identity pass, then the hash pass, over the same string."""
    return apply_hash_list(apply_identity_list(config, text), text)


def split_compact(text: str) -> tuple[str, str]:
    """Split compact form into ``(head, tail)``.

    *head* is everything before the first ``;``.  *tail* is the segment
    between the first and second ``;``, or ``""`` when there is no ``;``.
    """
    parts = text.split(COMPACT_SEPARATOR)
    return parts[0], parts[1] if len(parts) > 1 else ""


def apply_compact_form(config: EffectiveConfig, text: str) -> EffectiveConfig:
    """Apply ``<identity list>;<hash list>``."""
    head, tail = split_compact(text)
    return apply_hash_list(apply_identity_list(config, head), tail)


# -- config files --------------------------------------------------------------

def clean_line(line: str) -> str:
    """Blank ``#`` comment lines and drop the first ``<!-- ... -->`` span."""
    line = _COMMENT_LINE.sub("", line, count=1)
    return _HTML_COMMENT.sub("", line, count=1)


def load_compact_lines(path: Path | str) -> list[str]:
    """Read *path* and return its meaningful lines in file order.

    Lines left empty (or whitespace-only) after :func:`clean_line` are
    discarded.  A missing file yields ``[]``.

    Raises:
        ConfigLoadError: If the file exists but cannot be read as UTF-8.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Config file %s not found", path)
        return []

    try:
        content = path.read_text("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"Cannot read config file {path}: {exc}") from exc

    lines = []
    for raw in content.splitlines():
        cleaned = clean_line(raw)
        if cleaned.strip():
            lines.append(cleaned)
    return lines


def load_config_file(path: Path | str) -> EffectiveConfig | None:
    """Build a configuration from the last meaningful line of *path*.

    The line is applied as compact form on top of the defaults, not on top
    of anything resolved elsewhere.

    Returns:
        The file-derived configuration, or ``None`` when the file has no
        meaningful lines.
    """
    lines = load_compact_lines(path)
    if not lines:
        logger.debug("Config file %s has no usable lines", path)
        return None
    return apply_compact_form(default_config(), lines[-1])


# -- resolution ----------------------------------------------------------------

def resolve_config(
    *,
    text: str | None = None,
    hash_params: str | None = None,
    slkv: str | None = None,
    sslf: str | None = None,
    file: str | None = None,
    save: str | None = None,
) -> EffectiveConfig:
    """Fold all configuration sources into one :class:`EffectiveConfig`.

    Inline sources merge field by field in the order *text*, *hash_params*,
    *slkv*, *sslf*.  When *file* yields a configuration it replaces the
    inline result wholesale.  ``input_file``/``output_file`` are always
    taken from *file*/*save*.

    Raises:
        ConfigLoadError: If *file* exists but cannot be read.
    """
    patches: tuple[tuple[str | None, ConfigPatch], ...] = (
        (text, apply_identity_list),
        (hash_params, apply_hash_list),
        (slkv, apply_combined_list),
        (sslf, apply_compact_form),
    )

    config = default_config()
    for raw, patch in patches:
        if raw is not None:
            config = patch(config, raw)

    if file is not None:
        file_config = load_config_file(file)
        if file_config is not None:
            logger.debug("Using configuration from %s", file)
            config = file_config

    return config.model_copy(update={"input_file": file, "output_file": save})
