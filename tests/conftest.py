from __future__ import annotations

import logging
from typing import Any

import pytest

TAGS = {
    "favorite": {"label": "Favorite", "description": "Favorites.", "color": "#e9669e"},
    "api": {"label": "API", "description": "Cardano API.", "color": "#39ca30"},
    "getstarted": {"label": "Get Started", "description": "Has a get started page.", "color": "#dfd545"},
    "library": {"label": "Library", "description": "Cardano library.", "color": "#a44fb7"},
    "operatortool": {"label": "Operator Tool", "description": "Stake pool operator tools.", "color": "#4267b2"},
}


def make_entry(**overrides: Any) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "title": "Example",
        "description": "An example builder tool.",
        "preview": "builder-tools/example.png",
        "website": "https://example.com",
        "getstarted": None,
        "tags": ["api"],
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def tags() -> dict[str, dict[str, str]]:
    return dict(TAGS)


@pytest.fixture(autouse=True)
def _reset_console_logging():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_showcase_console", False):
            root.removeHandler(h)
