"""CLI entrypoint: list projects or fetch the newest build for this host."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from .config import load_config
from .errors import BinfetchError
from .host import host_arch, host_os_name
from .logging_utils import configure_logging
from .models import Buildset, Project
from .service import BuildFetcher, archive_filename
from .storage import S3BuildStore

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="binfetch", description="Fetch private build artefacts")
    parser.add_argument("--config", type=Path, default=None, help="Path to binfetch config YAML")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log store requests")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("ls", help="List available artefacts")

    get_parser = subparsers.add_parser("get", help="Download an artefact")
    get_parser.add_argument("project", help="Project to download")
    get_parser.add_argument("--branch", default="master", help="Branch to get")
    get_parser.add_argument("--os", dest="os_name", default=None, help="Override host OS name")
    get_parser.add_argument("--arch", default=None, help="Override host architecture")
    get_parser.add_argument("--output-dir", type=Path, default=Path("."))
    return parser.parse_args(argv)


def display_tag(tag: str) -> str:
    return tag.replace("_", " ")


def format_built_at(buildset: Buildset) -> str:
    built_at = datetime.fromtimestamp(buildset.unix_timestamp, tz=timezone.utc)
    return built_at.strftime("%Y-%m-%d %H:%M:%S UTC")


def print_projects(projects: list[Project]) -> None:
    print("Available projects: ")
    for project in projects:
        print(f"\t{project.name}")
        for branch in project.branches:
            print(f"\t\t- {branch}")


def _get(fetcher: BuildFetcher, args: argparse.Namespace) -> None:
    os_name = args.os_name or host_os_name()
    arch = args.arch or host_arch()
    buildset = fetcher.latest_buildset(args.project, args.branch)
    print(
        f"Found compatible archive built at {format_built_at(buildset)} "
        f"({display_tag(buildset.tag)})"
    )
    archive_key = fetcher.archive_for(buildset, os_name, arch)
    print(f"Downloading {archive_filename(archive_key)} ...")
    fetcher.download(archive_key, args.output_dir)
    print("success.")


def run(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
        store = S3BuildStore(
            config.s3_bucket,
            region_name=config.s3_region,
            endpoint_url=config.s3_endpoint_url,
        )
        fetcher = BuildFetcher(store)
        if args.command == "ls":
            print_projects(fetcher.list_projects())
        else:
            _get(fetcher, args)
    except BinfetchError as exc:
        logger.info("binfetch %s failed code=%s", args.command, exc.code)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(
        level=logging.INFO if args.verbose else logging.WARNING,
        log_path=args.log_file,
    )
    raise SystemExit(run(args))


if __name__ == "__main__":
    main()
