"""
validator.py

Responsibility: Fail-fast structural checks for a single showcase entry.

Entries arrive as raw mappings (straight from the YAML data file). Each entry is
checked in a fixed order and the first violated rule wins:

1) unknown attribute names
2) title / description / website present
3) website is an http(s) URL
4) preview is a bundled local image, not a remote URL
5) tags are well-formed and all known
6) `getstarted` is explicit and agrees with the `getstarted` tag
7) operator tools keep their get started page under the operator docs

Every violation is reported as a `ShowcaseError` naming the entry's title.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

VALID_KEYS = ("title", "description", "preview", "website", "getstarted", "tags")

TAG_FAVORITE = "favorite"
TAG_GETSTARTED = "getstarted"
TAG_OPERATORTOOL = "operatortool"

OPERATOR_GETSTARTED_PREFIX = "/docs/operate-a-stake-pool/"


class ShowcaseError(ValueError):
    """An invalid showcase entry. `rule` names the check that failed."""

    def __init__(self, title: Any, rule: str, detail: str) -> None:
        super().__init__(f"Showcase site with title={title} contains errors:\n{detail}")
        self.title = title
        self.rule = rule
        self.detail = detail


class _RuleViolation(ValueError):
    def __init__(self, rule: str, detail: str) -> None:
        super().__init__(detail)
        self.rule = rule
        self.detail = detail


@dataclass(frozen=True)
class LocalAsset:
    """An image bundled with the site, addressed by its path."""

    path: str


@dataclass(frozen=True)
class RemoteImage:
    """An image hosted elsewhere. Never accepted as a preview."""

    url: str


Preview = LocalAsset | RemoteImage


def parse_preview(value: str) -> Preview:
    if value.startswith("http") or value.startswith("//"):
        return RemoteImage(url=value)
    return LocalAsset(path=value)


def _check_fields(entry: Mapping[str, Any]) -> None:
    unknown = [k for k in entry if k not in VALID_KEYS]
    if unknown:
        raise _RuleViolation("fields", f"Site contains unknown attribute names=[{','.join(map(str, unknown))}]")


def _check_required(entry: Mapping[str, Any], key: str) -> None:
    value = entry.get(key)
    if not value or not isinstance(value, str):
        raise _RuleViolation(key, f"Site {key} is missing")


def _check_website(entry: Mapping[str, Any]) -> None:
    _check_required(entry, "website")
    website = entry["website"]
    if not (website.startswith("http://") or website.startswith("https://")):
        raise _RuleViolation("website", f"Site website does not look like a valid url: {website}")


def _check_preview(entry: Mapping[str, Any]) -> None:
    preview = entry.get("preview")
    if not preview or not isinstance(preview, str) or isinstance(parse_preview(preview), RemoteImage):
        raise _RuleViolation(
            "preview",
            f"Site has bad image preview=[{preview}].\n"
            "The image should be bundled with the Developer Portal, and not use remote HTTP or HTTPS URLs",
        )


def _check_tags(entry: Mapping[str, Any], tags: Mapping[str, Any]) -> None:
    entry_tags = entry.get("tags")
    if (
        not entry_tags
        or not isinstance(entry_tags, list)
        or not all(isinstance(t, str) for t in entry_tags)
        or "" in entry_tags
    ):
        raise _RuleViolation("tags", f"Bad showcase tags=[{json.dumps(entry_tags, default=str)}]")

    unknown = [t for t in entry_tags if t not in tags]
    if unknown:
        raise _RuleViolation(
            "tags",
            f"Unknown tags=[{','.join(unknown)}]\nThe available tags are {','.join(tags)}",
        )


def _check_getstarted(entry: Mapping[str, Any]) -> None:
    if "getstarted" not in entry:
        raise _RuleViolation(
            "getstarted",
            "The getstarted attribute is required.\n"
            "If your builder tool has no get started page, please make it explicit with 'getstarted: null'",
        )

    getstarted = entry["getstarted"]
    if getstarted is not None and (not isinstance(getstarted, str) or not getstarted):
        raise _RuleViolation(
            "getstarted",
            f"The getstarted attribute must be a link or null, got {getstarted!r}",
        )

    has_tag = TAG_GETSTARTED in entry["tags"]
    if getstarted is None and has_tag:
        raise _RuleViolation(
            "getstarted",
            "You can't add the getstarted tag to a site that does not have a link to a get started page.",
        )
    if getstarted is not None and not has_tag:
        raise _RuleViolation(
            "getstarted",
            "For builder tools with get started sites, please add the 'getstarted' tag.",
        )


def _check_operator_tool(entry: Mapping[str, Any]) -> None:
    entry_tags = entry["tags"]
    if TAG_GETSTARTED not in entry_tags or TAG_OPERATORTOOL not in entry_tags:
        return
    getstarted = entry["getstarted"]
    if not (isinstance(getstarted, str) and getstarted.startswith(OPERATOR_GETSTARTED_PREFIX)):
        raise _RuleViolation(
            "operatortool",
            "Get started pages for stake pool operator tools, should go into the operate-a-stake-pool-section "
            f"({OPERATOR_GETSTARTED_PREFIX}), got {getstarted}",
        )


def ensure_valid(entry: Mapping[str, Any], tags: Mapping[str, Any]) -> None:
    """
    Check one raw entry against the tag catalog.

    Raises `ShowcaseError` for the first violated rule; returns None otherwise.
    """
    if not isinstance(entry, Mapping):
        raise ShowcaseError(None, "fields", f"Site must be a mapping, got {type(entry).__name__}")

    try:
        _check_fields(entry)
        _check_required(entry, "title")
        _check_required(entry, "description")
        _check_website(entry)
        _check_preview(entry)
        _check_tags(entry, tags)
        _check_getstarted(entry)
        _check_operator_tool(entry)
    except _RuleViolation as e:
        raise ShowcaseError(entry.get("title"), e.rule, e.detail) from e


def collect_errors(entries: Iterable[Mapping[str, Any]], tags: Mapping[str, Any]) -> list[ShowcaseError]:
    """
    Check every entry and return all errors (at most one per entry), in entry order.

    Unlike loading the registry, this does not stop at the first bad entry.
    """
    errors: list[ShowcaseError] = []
    for entry in entries:
        try:
            ensure_valid(entry, tags)
        except ShowcaseError as e:
            errors.append(e)
    return errors
