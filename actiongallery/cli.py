"""CLI entrypoints for actiongallery commands."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

from .config import ConfigError, GalleryConfig, load_config
from .logging import configure_logging
from .pipeline import GalleryPipeline
from .remote.client import GalleryError


def _logging_parent() -> argparse.ArgumentParser:
    # Subcommands repeat the logging flags with suppressed defaults so a value
    # given before the command is not reset after it.
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log debug detail and every GitHub request.",
    )
    parent.add_argument(
        "--log-file",
        default=argparse.SUPPRESS,
        help="Also write logs to this file.",
    )
    return parent


def _source_parent() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        default=".",
        help="Path to .actiongallery.yml or its directory (defaults to current directory).",
    )
    parent.add_argument(
        "--root-path",
        default=None,
        help="Repository directory to walk for connector files.",
    )
    return parent


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="actiongallery",
        description="Build a filterable gallery of Flow Actions connectors.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug detail and every GitHub request.",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    parents = [_logging_parent(), _source_parent()]
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build", parents=parents, help="Render the gallery to a static HTML file."
    )
    build_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Destination HTML file (defaults to public/index.html).",
    )

    subparsers.add_parser(
        "list", parents=parents, help="Print enriched connector records as JSON."
    )

    serve_parser = subparsers.add_parser(
        "serve", parents=parents, help="Serve the live gallery over HTTP."
    )
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _resolve_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> GalleryConfig:
    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    if args.root_path:
        config.source.root_path = args.root_path
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for actiongallery commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    config = _resolve_config(parser, args)

    if args.command == "build":
        pipeline = GalleryPipeline(config)
        output = Path(args.output) if args.output else None
        try:
            target, outcome = pipeline.run_build(output)
        except OSError as exc:
            parser.exit(1, f"actiongallery build failed: {exc}\n")
        rel_path = _relativize(target)
        if not outcome.ok:
            parser.exit(
                1,
                f"actiongallery build failed: {outcome.error}\nError page written to {rel_path}\n",
            )
        print(f"Gallery with {outcome.count} actions written to {rel_path}")
    elif args.command == "list":
        pipeline = GalleryPipeline(config)
        try:
            records = asyncio.run(pipeline.load_records())
        except GalleryError as exc:
            parser.exit(1, f"actiongallery list failed: {exc}\nRun with --verbose for more details.\n")
        print(json.dumps([asdict(record) for record in records], indent=2))
    elif args.command == "serve":
        from .service import run_service

        run_service(args.host, args.port, lambda: GalleryPipeline(config))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
