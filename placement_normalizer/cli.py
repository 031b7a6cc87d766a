#!/usr/bin/env python3
"""
Command line entry point.

Usage:
  placement-normalizer init
  placement-normalizer list
  placement-normalizer convert board.csv
  placement-normalizer convert --all --non-interactive
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .bootstrap import initialise
from .config import Settings
from .convert import convert_batch, list_input_files
from .resolver import ConsoleResolver, DecliningResolver


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="placement-normalizer",
        description="Normalize component placement exports against the component catalog.",
    )
    ap.add_argument("--base-dir", default=None, help="Workspace holding the working folders (default: current directory)")
    ap.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("init", help="Create working folders and seed catalog files")
    sub.add_parser("list", help="List files waiting for conversion")

    conv = sub.add_parser("convert", help="Convert placement files")
    conv.add_argument("files", nargs="*", help="Files to convert (looked up in the conversion folder if not a path)")
    conv.add_argument("--all", action="store_true", help="Convert every file in the conversion folder")
    conv.add_argument(
        "--non-interactive", action="store_true",
        help="Leave unknown designators unchanged instead of asking",
    )
    return ap.parse_args(argv)


def _resolve_inputs(names: List[str], settings: Settings) -> List[Path]:
    paths = []
    for name in names:
        p = Path(name)
        if not p.exists() and (settings.input_path / name).exists():
            p = settings.input_path / name
        paths.append(p)
    return paths


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    settings = Settings(base_dir=Path(args.base_dir)) if args.base_dir else Settings()

    try:
        initialise(settings)
    except OSError as exc:
        logging.error("Initialisation failed: %s", exc)
        return 1

    if args.command == "init":
        return 0

    available = list_input_files(settings.input_path, settings.input_extensions)
    if args.command == "list":
        for path in available:
            print(path.name)
        return 0

    files = available if args.all else _resolve_inputs(args.files, settings)
    if not files:
        print("No files.")
        return 0

    resolver = DecliningResolver() if args.non_interactive else ConsoleResolver()
    print(f"Total files: {len(files)}")
    batch = convert_batch(files, settings.output_path, settings.components_path, resolver)
    for result in batch.results:
        print(f"- {result.input_path.name} -> {result.output_path} ({result.lines_out}/{result.lines_in} rows)")
    for failure in batch.failures:
        print(f"- {failure.input_path.name}: FAILED ({failure.reason})")
    print(f"Done: {batch.succeeded}/{batch.total} succeeded.")

    if isinstance(resolver, DecliningResolver) and resolver.unresolved:
        print("Unresolved designators: " + ", ".join(resolver.unresolved))

    return 0 if batch.ok else 1


if __name__ == "__main__":
    sys.exit(main())
