"""shs entry point.

Usage:
  shs [ROOT] [-i] [--nosort] [--nocache] [--cors] [--ip IP] [-p PORT]
      [-t THREADS] [--try-file PATH] [-s] [--log-level LEVEL]

Options not given on the command line fall back to SHS_* environment
variables and .env.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from pydantic import ValidationError

from shs import __version__
from shs.config import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shs",
        description="Simple HTTP server with sortable directory indexes",
    )
    parser.add_argument("root", nargs="?", help="Root directory (default: current directory)")
    parser.add_argument(
        "-i", "--index", action="store_true",
        help="Serve index.html / index.htm instead of a listing when present",
    )
    parser.add_argument(
        "--nosort", action="store_true",
        help="Disable directory entry sorting (by: name, modified, size)",
    )
    parser.add_argument("--nocache", action="store_true", help="Send Cache-Control: no-store")
    parser.add_argument(
        "--cors", action="store_true",
        help='Enable CORS via the "Access-Control-Allow-Origin" header',
    )
    parser.add_argument("--ip", help="IP address to bind (default: 0.0.0.0)")
    parser.add_argument("-p", "--port", type=int, help="Port number (default: 8000)")
    parser.add_argument("-t", "--threads", type=int, help="Number of worker processes")
    parser.add_argument(
        "--try-file", "--try-file-404", dest="try_file", metavar="PATH",
        help="Serve this file (root relative) in place of missing files",
    )
    parser.add_argument("-s", "--silent", action="store_true", help="Disable all output")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Overlay explicitly given CLI options on env/.env settings."""
    overrides: dict[str, Any] = {
        "root": args.root,
        "host": args.ip,
        "port": args.port,
        "threads": args.threads,
        "try_file": args.try_file,
        "log_level": args.log_level,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.index:
        overrides["index_enabled"] = True
    if args.nosort:
        overrides["sort_enabled"] = False
    if args.nocache:
        overrides["cache_enabled"] = False
    if args.cors:
        overrides["cors"] = True
    if args.silent:
        overrides["silent"] = True
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        parser.error(str(e))

    from shs.main import run

    if not settings.silent:
        print(f"shs v{__version__}: serving {settings.root} on http://{settings.host}:{settings.port}/", file=sys.stderr)
    run(settings)


if __name__ == "__main__":
    main()
