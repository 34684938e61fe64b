"""CLI entry point for running as `python -m propresenter_export`.

Usage:
    python -m propresenter_export entries.json
    python -m propresenter_export entries.json --translation BasisBibel --output-dir out/
    python -m propresenter_export entries.json --profile legacy --workers 4
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from .config import ExportConfig, PROFILES
from .exceptions import ExportError
from .exporter import deliver_archive, generate_archive
from .models import PlaylistEntry


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propresenter_export",
        description="Build a ProPresenter playlist zip from a JSON list of entries.",
    )
    parser.add_argument("entries", type=Path, help="JSON array of playlist entries")
    parser.add_argument("--translation", help="Bible translation for scripture entries")
    parser.add_argument(
        "--profile", choices=sorted(PROFILES), help="Output profile (default: pro6)"
    )
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Where to write the zip")
    parser.add_argument("--workers", type=int, help="Threads used to render presentations")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_entries(path: Path) -> List[PlaylistEntry]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return TypeAdapter(List[PlaylistEntry]).validate_python(data)


def run(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    try:
        config = ExportConfig.from_env(profile=args.profile, max_workers=args.workers)
    except KeyError as e:
        print(f"Invalid configuration: {e.args[0]}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        entries = load_entries(args.entries)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"Could not read entries from {args.entries}: {e}", file=sys.stderr)
        return 1

    try:
        result = generate_archive(entries, args.translation, config=config)
        path = deliver_archive(result, args.output_dir)
    except ExportError as e:
        print(f"Export failed: {e}", file=sys.stderr)
        return 1

    print(path)
    return 0


def main():
    """Entry point for `python -m propresenter_export`."""
    sys.exit(run())


if __name__ == "__main__":
    main()
