"""
cli.py

Responsibility: CLI entrypoint for the builder tools showcase.

Commands:
- `validate`: check every entry of the data file and report all problems
- `list`: print entries in display order (favorites first)
- `export`: write the sorted registry as JSON for the site build

This module should orchestrate behavior but keep concerns isolated:
- Loading / typed model: `registry.py`
- Entry checks: `validator.py`
- Ordering: `sorter.py`
- JSON output: `exporter.py`
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from showcase.exporter import ExportError, export_registry
from showcase.logging_setup import setup_logging
from showcase.registry import RegistryError, load_registry, parse_tags, read_data_file
from showcase.validator import ShowcaseError, collect_errors

DATA_ENV_VAR = "SHOWCASE_DATA"


class CLIError(RuntimeError):
    pass


def _data_path(args: argparse.Namespace) -> Path | None:
    value = args.data or os.environ.get(DATA_ENV_VAR) or ""
    return Path(value) if value else None


def validate_cmd(args: argparse.Namespace) -> int:
    raw_tags, raw_entries = read_data_file(_data_path(args))
    tags = parse_tags(raw_tags)
    if not isinstance(raw_entries, list):
        raise CLIError("`tools` must be a list of showcase entries.")

    errors = collect_errors(raw_entries, tags)
    for e in errors:
        print(f"{e}\n", file=sys.stderr)
    if errors:
        print(f"{len(errors)} of {len(raw_entries)} builder tools are invalid", file=sys.stderr)
        return 1

    print(f"All {len(raw_entries)} builder tools are valid")
    return 0


def list_cmd(args: argparse.Namespace) -> int:
    registry = load_registry(_data_path(args))
    for entry in registry.sorted_entries:
        if args.favorites and not entry.is_favorite:
            continue
        marker = "*" if entry.is_favorite else " "
        print(f"{marker} {entry.title}")
    return 0


def export_cmd(args: argparse.Namespace) -> int:
    registry = load_registry(_data_path(args))
    result = export_registry(registry, args.output_dir, overwrite=bool(args.overwrite))
    print(f"Exported {result.entries} builder tools ({result.files_written} files) to {args.output_dir}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="showcase", description="Builder tools showcase registry")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    data_help = f"Path to the data file (default: env {DATA_ENV_VAR}, then the bundled file)"

    v = sub.add_parser("validate", help="Check every builder tool and report all errors")
    v.add_argument("--data", default=None, help=data_help)
    v.set_defaults(func=validate_cmd)

    ls = sub.add_parser("list", help="Print builder tools in display order")
    ls.add_argument("--data", default=None, help=data_help)
    ls.add_argument("--favorites", action="store_true", help="Only print favorites")
    ls.set_defaults(func=list_cmd)

    e = sub.add_parser("export", help="Write the sorted registry as JSON")
    e.add_argument("output_dir", help="Directory to write tags.json and builder-tools.json into")
    e.add_argument("--data", default=None, help=data_help)
    e.add_argument("--overwrite", action="store_true", help="Replace existing output files")
    e.set_defaults(func=export_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        return int(args.func(args))
    except (RegistryError, ShowcaseError, ExportError, CLIError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
