"""Sequences store listings into the resolution components and downloads."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .archives import match_archive
from .catalog import build_catalog
from .errors import NotFoundError, TransportError
from .keys import BuildsetKeyParser
from .models import Buildset, Listing, Project
from .resolver import BuildsetResolver
from .storage import BuildStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    buildset: Buildset
    archive_key: str
    path: Path


def archive_filename(archive_key: str) -> str:
    return archive_key.rsplit("/", 1)[-1]


class BuildFetcher:
    def __init__(self, store: BuildStore, parser: BuildsetKeyParser | None = None) -> None:
        self.store = store
        self.resolver = BuildsetResolver(parser or BuildsetKeyParser())

    def list_projects(self) -> list[Project]:
        top_level = self.store.list_prefixes("")
        branch_listings: dict[str, Listing] = {}
        if not top_level.truncated:
            for prefix in top_level.items:
                branch_listings[prefix] = self.store.list_prefixes(prefix)
        projects = build_catalog(top_level, branch_listings)
        logger.info("binfetch catalog projects=%d", len(projects))
        return projects

    def latest_buildset(self, project: str, branch: str = "master") -> Buildset:
        listing = self.store.list_prefixes(f"{project}/{branch}/")
        buildset = self.resolver.resolve_latest(listing, project, branch)
        logger.info(
            "binfetch latest buildset key=%s timestamp=%d", buildset.key, buildset.unix_timestamp
        )
        return buildset

    def archive_for(self, buildset: Buildset, os_name: str, arch: str) -> str:
        listing = self.store.list_keys(buildset.key)
        archive_key = match_archive(listing, os_name, arch)
        logger.info("binfetch archive key=%s os=%s arch=%s", archive_key, os_name, arch)
        return archive_key

    def download(self, archive_key: str, output_dir: Path) -> Path:
        """Download into ``output_dir``; a failed download leaves no file behind."""
        filename = archive_filename(archive_key)
        if not filename:
            raise NotFoundError(f"archive key '{archive_key}' names no file")
        path = output_dir / filename
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("wb") as handle:
                self.store.download(archive_key, handle)
            os.replace(tmp_path, path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise TransportError(f"cannot write {path}: {exc}") from exc
        except TransportError:
            tmp_path.unlink(missing_ok=True)
            raise
        return path

    def fetch(
        self,
        project: str,
        branch: str,
        os_name: str,
        arch: str,
        output_dir: Path,
    ) -> FetchResult:
        buildset = self.latest_buildset(project, branch)
        archive_key = self.archive_for(buildset, os_name, arch)
        path = self.download(archive_key, output_dir)
        return FetchResult(buildset=buildset, archive_key=archive_key, path=path)
