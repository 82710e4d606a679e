"""Archive selection inside a buildset.

Matching is plain substring containment of the OS and architecture tokens,
kept for compatibility with archive names already in the store. It is
sensitive to listing order and to tokens that occur inside unrelated words.
"""

from __future__ import annotations

from .errors import NotFoundError, TruncatedListingError
from .models import Listing


def archive_matches(key: str, os_name: str, arch: str) -> bool:
    return os_name in key and arch in key


def match_archive(listing: Listing, os_name: str, arch: str) -> str:
    """Return the first key carrying both tokens.

    There is no "universal" architecture fallback for macos. A truncated
    listing fails rather than matching against a partial first page.
    """
    if listing.truncated:
        raise TruncatedListingError("truncated archive listing")
    for key in listing.items:
        if archive_matches(key, os_name, arch):
            return key
    raise NotFoundError(f"no matching archive found for '{os_name}', '{arch}'")
