"""
showcase package

This package implements the builder tools showcase registry: a hand-maintained
list of tools and a fixed tag catalog, validated once at build time.

Key responsibilities are split across modules:
- `registry.py`: load the YAML data file into an immutable, validated `Registry`
- `validator.py`: per-entry structural checks (`ensure_valid`, `collect_errors`)
- `sorter.py`: display ordering (favorites first, then alphabetical)
- `exporter.py`: deterministic JSON output for the page-rendering layer
- `cli.py`: CLI entrypoint (validate / list / export)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
