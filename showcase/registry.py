"""
registry.py

Responsibility: Load the builder tools data file into an immutable, validated `Registry`.

The data file is YAML with two top-level keys:
- `tags`: mapping of tag id -> {label, description, color}
- `tools`: list of showcase entries (see `validator.VALID_KEYS`)

Loading is eager and fail-fast: every entry is validated, in file order, and the
first invalid entry aborts the load. Use `validator.collect_errors` on the raw
data for a full report instead.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from showcase.sorter import sort_showcases
from showcase.validator import TAG_FAVORITE, LocalAsset, ensure_valid

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "builder-tools.yaml"

TAG_KEYS = ("label", "description", "color")


class RegistryError(ValueError):
    pass


@dataclass(frozen=True)
class Tag:
    """One entry of the tag catalog."""

    id: str
    label: str
    description: str
    color: str


@dataclass(frozen=True)
class ShowcaseEntry:
    """A validated builder tool listing."""

    title: str
    description: str
    preview: LocalAsset
    website: str
    getstarted: str | None
    tags: tuple[str, ...]

    @property
    def is_favorite(self) -> bool:
        return TAG_FAVORITE in self.tags


@dataclass(frozen=True)
class Registry:
    """Tag catalog plus entries, in file order and in display order."""

    tags: Mapping[str, Tag]
    entries: tuple[ShowcaseEntry, ...]
    sorted_entries: tuple[ShowcaseEntry, ...]

    @property
    def tag_list(self) -> list[str]:
        return list(self.tags)


def parse_tags(raw_tags: Any) -> Mapping[str, Tag]:
    """Build the read-only tag catalog, keeping the data file's order."""
    if not isinstance(raw_tags, dict) or not raw_tags:
        raise RegistryError("`tags` must be a non-empty mapping of tag id -> tag.")

    catalog: dict[str, Tag] = {}
    for tag_id, raw in raw_tags.items():
        if not isinstance(tag_id, str) or not tag_id or tag_id != tag_id.lower():
            raise RegistryError(f"Tag ids must be non-empty lowercase strings, got {tag_id!r}")
        if not isinstance(raw, dict):
            raise RegistryError(f"Tag {tag_id!r} must be a mapping.")
        missing = [k for k in TAG_KEYS if not isinstance(raw.get(k), str) or not raw.get(k)]
        if missing:
            raise RegistryError(f"Tag {tag_id!r} is missing {', '.join(missing)}")
        catalog[tag_id] = Tag(id=tag_id, label=raw["label"], description=raw["description"], color=raw["color"])
    return MappingProxyType(catalog)


def parse_entry(raw: Mapping[str, Any], tags: Mapping[str, Any]) -> ShowcaseEntry:
    """Validate one raw entry (raising `ShowcaseError`) and convert it."""
    ensure_valid(raw, tags)
    # ensure_valid has already rejected remote previews
    return ShowcaseEntry(
        title=raw["title"],
        description=raw["description"],
        preview=LocalAsset(path=raw["preview"]),
        website=raw["website"],
        getstarted=raw["getstarted"],
        tags=tuple(raw["tags"]),
    )


def _warn_ambiguous_titles(entries: tuple[ShowcaseEntry, ...]) -> None:
    counts = Counter(e.title.lower() for e in entries)
    for title, n in counts.items():
        if n > 1:
            logger.warning("Title %r is used by %d entries; their display order is arbitrary", title, n)


def build_registry(raw_tags: Any, raw_entries: Any) -> Registry:
    """
    Build a `Registry` from already-parsed data.

    Raises `RegistryError` for malformed top-level data and `ShowcaseError`
    for the first invalid entry.
    """
    tags = parse_tags(raw_tags)
    if not isinstance(raw_entries, list):
        raise RegistryError("`tools` must be a list of showcase entries.")

    entries = tuple(parse_entry(raw, tags) for raw in raw_entries)
    _warn_ambiguous_titles(entries)

    registry = Registry(tags=tags, entries=entries, sorted_entries=sort_showcases(entries))
    logger.info(
        "Loaded %d builder tools (%d favorites, %d tags)",
        len(entries),
        sum(1 for e in entries if e.is_favorite),
        len(tags),
    )
    return registry


def read_data_file(path: str | Path | None = None) -> tuple[Any, Any]:
    """
    Read the YAML data file and return its raw `(tags, tools)` sections, unvalidated.
    """
    data_path = Path(path) if path is not None else DEFAULT_DATA_PATH
    if not data_path.exists():
        raise RegistryError(f"Data file does not exist: {data_path}")

    try:
        text = data_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryError(f"Cannot read data file {data_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RegistryError(f"Data file is not valid YAML: {data_path}") from e
    if not isinstance(data, dict):
        raise RegistryError("Data file must be a mapping/object at the top level.")

    logger.debug("Read data file %s", data_path)
    return data.get("tags"), data.get("tools")


def load_registry(path: str | Path | None = None) -> Registry:
    """Load and validate the data file (default: the bundled one)."""
    raw_tags, raw_entries = read_data_file(path)
    return build_registry(raw_tags, raw_entries)
