"""Host platform description used for display only."""

from __future__ import annotations

import os
import platform
import sys
from typing import Final

from pydantic import BaseModel

_OS_ALIASES: Final[dict[str, str]] = {
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
}

_ARCH_ALIASES: Final[dict[str, str]] = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
}


class PlatformInfo(BaseModel, frozen=True):
    os: str
    arch: str
    family: str

    @property
    def display(self) -> str:
        """``<os>-<arch>``, e.g. ``linux-x86_64``."""
        return f"{self.os}-{self.arch}"


def normalize_os(name: str) -> str:
    name = name.lower()
    if name.startswith("linux"):
        return "linux"
    return _OS_ALIASES.get(name, name)


def normalize_arch(machine: str) -> str:
    machine = machine.lower()
    return _ARCH_ALIASES.get(machine, machine) or "unknown"


def detect_platform() -> PlatformInfo:
    """Describe the running interpreter's OS, CPU architecture and OS family."""
    return PlatformInfo(
        os=normalize_os(sys.platform),
        arch=normalize_arch(platform.machine()),
        family="windows" if os.name == "nt" else "unix",
    )
