"""Value types built from object-store listings."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Listing:
    """One page of a delimiter listing, in the order the store returned it."""

    items: tuple[str, ...] = ()
    truncated: bool = False


@dataclass(frozen=True)
class Project:
    name: str
    branches: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Buildset:
    key: str
    project: str
    branch: str
    unix_timestamp: int
    tag: str
