from __future__ import annotations

import re

import pytest

from binfetch.errors import NotFoundError, ParseError, TruncatedListingError
from binfetch.keys import BuildsetKeyParser
from binfetch.models import Listing
from binfetch.resolver import BuildsetResolver


def _resolver() -> BuildsetResolver:
    return BuildsetResolver(BuildsetKeyParser())


def test_resolve_latest_picks_greatest_timestamp() -> None:
    listing = Listing(items=("proj/rel/100__a/", "proj/rel/300__b/", "proj/rel/200__c/"))
    buildset = _resolver().resolve_latest(listing, "proj", "rel")
    assert buildset.unix_timestamp == 300
    assert buildset.tag == "b"
    assert buildset.key == "proj/rel/300__b/"


def test_resolve_latest_tie_keeps_first_in_listing_order() -> None:
    listing = Listing(items=("proj/rel/100__a/", "proj/rel/300__first/", "proj/rel/300__second/"))
    buildset = _resolver().resolve_latest(listing, "proj", "rel")
    assert buildset.tag == "first"


def test_resolve_latest_ignores_other_branches() -> None:
    listing = Listing(items=("proj/dev/900__x/", "proj/rel/100__a/"))
    buildset = _resolver().resolve_latest(listing, "proj", "rel")
    assert buildset.branch == "rel"
    assert buildset.unix_timestamp == 100


def test_resolve_latest_skips_non_conforming_prefixes() -> None:
    listing = Listing(items=("proj/rel/notes/", "proj/rel/99999999999999999999__huge/", "proj/rel/5__ok/"))
    buildset = _resolver().resolve_latest(listing, "proj", "rel")
    assert buildset.tag == "ok"


def test_resolve_latest_no_branch_match_is_not_found() -> None:
    listing = Listing(items=("proj/dev/100__a/",))
    with pytest.raises(NotFoundError, match="proj/rel"):
        _resolver().resolve_latest(listing, "proj", "rel")


def test_resolve_latest_empty_listing_is_not_found() -> None:
    with pytest.raises(NotFoundError):
        _resolver().resolve_latest(Listing(), "proj", "rel")


def test_resolve_latest_winner_must_parse() -> None:
    listing = Listing(items=("proj/rel/100__a/", "proj/rel/300/"))
    with pytest.raises(ParseError, match="proj/rel/300/"):
        _resolver().resolve_latest(listing, "proj", "rel")


def test_resolve_latest_uses_injected_parser() -> None:
    strict = BuildsetKeyParser(re.compile(r"^(\w+)/(\w+)/(\w+)/$", re.ASCII))
    listing = Listing(items=("proj/rel/100__a/extra/",))
    with pytest.raises(ParseError):
        BuildsetResolver(strict).resolve_latest(listing, "proj", "rel")


def test_resolve_latest_truncated_listing_fails() -> None:
    listing = Listing(items=("proj/rel/100__a/",), truncated=True)
    with pytest.raises(TruncatedListingError):
        _resolver().resolve_latest(listing, "proj", "rel")
