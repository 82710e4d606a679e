"""Newest-buildset selection under a project/branch prefix."""

from __future__ import annotations

import re

from .errors import NotFoundError, ParseError, TruncatedListingError
from .keys import BuildsetKeyParser, parse_epoch
from .models import Buildset, Listing

# sample prefix: 'some_project/master/1612926009__35da77044ea797e94c2e6fc8d69b1e1c51e49378/'
_TIMESTAMP_PATTERN = re.compile(r"^.+?/(.+?)/(\d+)", re.ASCII)


class BuildsetResolver:
    def __init__(self, parser: BuildsetKeyParser) -> None:
        self._parser = parser

    def resolve_latest(self, listing: Listing, project: str, branch: str) -> Buildset:
        """Return the buildset with the greatest epoch for ``branch``.

        Ties keep the first prefix in listing order. The winner must also
        satisfy the full key grammar.
        """
        if listing.truncated:
            raise TruncatedListingError(f"truncated buildset listing for '{project}/{branch}'")

        newest_timestamp: int | None = None
        newest_prefix: str | None = None
        for prefix in listing.items:
            match = _TIMESTAMP_PATTERN.search(prefix)
            if match is None:
                continue
            if match.group(1) != branch:
                continue
            timestamp = parse_epoch(match.group(2))
            if timestamp is None:
                continue
            if newest_timestamp is None or timestamp > newest_timestamp:
                newest_timestamp = timestamp
                newest_prefix = prefix

        if newest_prefix is None:
            raise NotFoundError(f"no matching buildset for '{project}/{branch}'")

        buildset = self._parser.parse(newest_prefix)
        if buildset is None:
            raise ParseError(f"could not parse '{newest_prefix}' as buildset")
        return buildset
