from __future__ import annotations

import pytest

from binfetch.catalog import branch_name, build_catalog, project_name
from binfetch.errors import TruncatedListingError
from binfetch.models import Listing, Project


def test_build_catalog_projects_and_branches() -> None:
    top_level = Listing(items=("engine/", "game/"))
    branch_listings = {
        "engine/": Listing(items=("engine/master/", "engine/release_2/")),
        "game/": Listing(items=("game/master/",)),
    }
    projects = build_catalog(top_level, branch_listings)
    assert projects == [
        Project(name="engine", branches=["master", "release_2"]),
        Project(name="game", branches=["master"]),
    ]


def test_build_catalog_skips_non_word_branches() -> None:
    top_level = Listing(items=("game/",))
    branch_listings = {
        "game/": Listing(items=("game/feature-x/", "game/master/", "game/")),
    }
    projects = build_catalog(top_level, branch_listings)
    assert projects[0].branches == ["master"]


def test_build_catalog_keeps_listing_order_without_dedup() -> None:
    top_level = Listing(items=("game/",))
    branch_listings = {"game/": Listing(items=("game/zeta/", "game/alpha/", "game/zeta/"))}
    assert build_catalog(top_level, branch_listings)[0].branches == ["zeta", "alpha", "zeta"]


def test_build_catalog_missing_branch_listing_is_empty() -> None:
    projects = build_catalog(Listing(items=("lonely/",)), {})
    assert projects == [Project(name="lonely", branches=[])]


def test_build_catalog_truncated_top_level_fails() -> None:
    top_level = Listing(items=("engine/",), truncated=True)
    with pytest.raises(TruncatedListingError):
        build_catalog(top_level, {"engine/": Listing(items=("engine/master/",))})


def test_build_catalog_truncated_branch_listing_fails() -> None:
    top_level = Listing(items=("engine/", "game/"))
    branch_listings = {
        "engine/": Listing(items=("engine/master/",)),
        "game/": Listing(items=("game/master/",), truncated=True),
    }
    with pytest.raises(TruncatedListingError, match="game/"):
        build_catalog(top_level, branch_listings)


def test_name_helpers() -> None:
    assert project_name("engine/") == "engine"
    assert project_name("engine") == "engine"
    assert branch_name("engine/master/") == "master"
    assert branch_name("engine/master") == "master"
    assert branch_name("master/") is None
