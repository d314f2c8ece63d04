"""Console banners and status lines for the CLI."""

from __future__ import annotations

from enum import IntEnum
from typing import Final

import typer

from passcraft.core.defaults import BANNER_WIDTH


class Status(IntEnum):
    SUCCESS = 0
    ERROR = 1
    WARNING = 2
    INFO = 3


_ICONS: Final[dict[Status, str]] = {
    Status.SUCCESS: "✅",
    Status.ERROR: "❌",
    Status.WARNING: "⚠️",
    Status.INFO: "ℹ️",
}


def format_step(msg: str, length: int = BANNER_WIDTH, fillchar: str = "=") -> str:
    """Center *msg* between runs of *fillchar*, at most *length* characters wide.

    Messages at least *length* characters long are returned unchanged.
    """
    if len(msg) >= length:
        return msg
    padding = fillchar * ((length - len(msg)) // 2)
    return f"{padding}{msg}{padding}"[:length]


def info_step(msg: str, length: int = BANNER_WIDTH, fillchar: str = "=") -> None:
    typer.echo(format_step(msg, length, fillchar))


def info_status(msg: str, status: Status = Status.INFO, *, err: bool = False) -> None:
    typer.echo(f"{_ICONS[status]} {msg}", err=err)
