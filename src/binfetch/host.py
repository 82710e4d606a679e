"""Host OS/architecture names in the vocabulary used by archive keys."""

from __future__ import annotations

import platform

_OS_NAMES = {
    "darwin": "macos",
    "windows": "win32",
}

_ARCH_NAMES = {
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
}


def host_os_name(system: str | None = None) -> str:
    name = (system if system is not None else platform.system()).lower()
    return _OS_NAMES.get(name, name)


def host_arch(machine: str | None = None) -> str:
    name = (machine if machine is not None else platform.machine()).lower()
    return _ARCH_NAMES.get(name, name)
