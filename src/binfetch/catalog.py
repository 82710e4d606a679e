"""Project/branch catalog assembled from two levels of prefix listings."""

from __future__ import annotations

import re
from typing import Mapping

from .errors import TruncatedListingError
from .models import Listing, Project

DELIMITER = "/"

_BRANCH_PATTERN = re.compile(r".+/(\w+)/?", re.ASCII)


def project_name(prefix: str) -> str:
    if prefix.endswith(DELIMITER):
        return prefix[: -len(DELIMITER)]
    return prefix


def branch_name(prefix: str) -> str | None:
    match = _BRANCH_PATTERN.fullmatch(prefix)
    if match is None:
        return None
    return match.group(1)


def build_catalog(top_level: Listing, branch_listings: Mapping[str, Listing]) -> list[Project]:
    """Build projects from the root listing and each project's branch listing.

    ``branch_listings`` is keyed by the top-level prefix the branches were
    listed under. Branch prefixes that are not a plain word segment are
    dropped. Any truncated listing fails the whole catalog.
    """
    if top_level.truncated:
        raise TruncatedListingError("truncated project listing")

    projects: list[Project] = []
    for prefix in top_level.items:
        listing = branch_listings.get(prefix, Listing())
        if listing.truncated:
            raise TruncatedListingError(f"truncated branch listing for '{prefix}'")
        branches = [name for name in (branch_name(item) for item in listing.items) if name]
        projects.append(Project(name=project_name(prefix), branches=branches))
    return projects
