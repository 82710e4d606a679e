"""Buildset key grammar: <project>/<branch>/<epoch>__<tag>."""

from __future__ import annotations

import re

from .models import Buildset

BUILDSET_PATTERN = r"(\w+)/(\w+)/(\w+)"
EPOCH_TAG_SEPARATOR = "__"
INT64_MAX = 2**63 - 1

_DIGITS = re.compile(r"[0-9]+")


def compile_buildset_grammar() -> re.Pattern[str]:
    return re.compile(BUILDSET_PATTERN, re.ASCII)


def parse_epoch(text: str) -> int | None:
    """Parse a base-10 digit run into a signed 64-bit value."""
    if not _DIGITS.fullmatch(text):
        return None
    value = int(text)
    if value > INT64_MAX:
        return None
    return value


class BuildsetKeyParser:
    """Turns a raw key into a Buildset, or None when the key does not conform."""

    def __init__(self, grammar: re.Pattern[str] | None = None) -> None:
        self._grammar = grammar or compile_buildset_grammar()

    def parse(self, raw: str) -> Buildset | None:
        match = self._grammar.search(raw)
        if match is None:
            return None
        project, branch, epoch_tag = match.groups()
        parts = epoch_tag.split(EPOCH_TAG_SEPARATOR)
        if len(parts) != 2:
            return None
        unix_timestamp = parse_epoch(parts[0])
        if unix_timestamp is None:
            return None
        return Buildset(
            key=raw,
            project=project,
            branch=branch,
            unix_timestamp=unix_timestamp,
            tag=parts[1],
        )
