"""
exporter.py

Responsibility: Deterministically write the registry as JSON for the page-rendering layer.

Rules:
- `tags.json` lists the tag catalog in catalog order.
- `builder-tools.json` lists entries in display order (favorites first).
- Output is UTF-8, indented, with `\\n` newlines and a trailing newline, so the
  same registry always produces byte-identical files.

This module intentionally does NOT render pages or touch images.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from showcase.registry import Registry, ShowcaseEntry

logger = logging.getLogger(__name__)

TAGS_FILENAME = "tags.json"
ENTRIES_FILENAME = "builder-tools.json"


class ExportError(RuntimeError):
    pass


@dataclass(frozen=True)
class ExportResult:
    files_written: int
    entries: int


def _entry_to_dict(entry: ShowcaseEntry) -> dict[str, Any]:
    return {
        "title": entry.title,
        "description": entry.description,
        "preview": entry.preview.path,
        "website": entry.website,
        "getstarted": entry.getstarted,
        "tags": list(entry.tags),
    }


def _to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def export_registry(
    registry: Registry,
    destination_dir: str | Path,
    *,
    overwrite: bool = False,
) -> ExportResult:
    """
    Write `tags.json` and `builder-tools.json` into destination_dir.

    - Creates destination_dir as needed.
    - Refuses to replace existing files unless `overwrite` is set.
    """
    dst_dir = Path(destination_dir).resolve()
    if dst_dir.exists() and not dst_dir.is_dir():
        raise ExportError(f"Export destination is not a directory: {dst_dir}")
    try:
        dst_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Cannot create export destination {dst_dir}: {e}") from e

    targets = [dst_dir / TAGS_FILENAME, dst_dir / ENTRIES_FILENAME]
    if not overwrite:
        existing = [p.name for p in targets if p.exists()]
        if existing:
            raise ExportError(f"Refusing to overwrite {', '.join(existing)} in {dst_dir} (use --overwrite to allow)")

    tags_payload = [
        {"id": tag.id, "label": tag.label, "description": tag.description, "color": tag.color}
        for tag in registry.tags.values()
    ]
    entries_payload = [_entry_to_dict(e) for e in registry.sorted_entries]

    # Serialize everything before touching disk
    outputs = [(targets[0], _to_json(tags_payload)), (targets[1], _to_json(entries_payload))]
    written: list[Path] = []
    for path, text in outputs:
        try:
            path.write_text(text, encoding="utf-8", newline="\n")
        except OSError as e:
            # Leave no partial export behind
            for done in written:
                done.unlink(missing_ok=True)
            raise ExportError(f"Cannot write {path}: {e}") from e
        written.append(path)
        logger.debug("Wrote %s", path)

    logger.info("Exported %d builder tools to %s", len(entries_payload), dst_dir)
    return ExportResult(files_written=len(targets), entries=len(entries_payload))
