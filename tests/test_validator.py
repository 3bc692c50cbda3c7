from __future__ import annotations

import pytest

from conftest import make_entry
from showcase.validator import (
    LocalAsset,
    RemoteImage,
    ShowcaseError,
    collect_errors,
    ensure_valid,
    parse_preview,
)


def test_valid_entry(tags) -> None:
    assert ensure_valid(make_entry(), tags) is None


def test_unknown_field(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(extra="x"), tags)
    assert exc.value.rule == "fields"
    assert "extra" in str(exc.value)
    assert "title=Example" in str(exc.value)


@pytest.mark.parametrize("key", ["title", "description", "website"])
def test_missing_required_field(tags, key: str) -> None:
    entry = make_entry()
    del entry[key]
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(entry, tags)
    assert exc.value.rule == key
    assert f"Site {key} is missing" in str(exc.value)


def test_empty_title(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(title=""), tags)
    assert exc.value.rule == "title"


def test_website_must_be_http(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(website="ftp://example.com"), tags)
    assert exc.value.rule == "website"
    assert "ftp://example.com" in str(exc.value)


def test_http_website_is_accepted(tags) -> None:
    ensure_valid(make_entry(website="http://example.com"), tags)


@pytest.mark.parametrize("preview", ["https://cdn.example.com/x.png", "http://x/y.png", "//cdn.example.com/x.png", "", None])
def test_bad_preview(tags, preview) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(preview=preview), tags)
    assert exc.value.rule == "preview"


def test_parse_preview() -> None:
    assert parse_preview("builder-tools/a.png") == LocalAsset(path="builder-tools/a.png")
    assert parse_preview("https://x/a.png") == RemoteImage(url="https://x/a.png")


@pytest.mark.parametrize("bad_tags", [[], None, "api", ["api", ""], [1]])
def test_bad_tags_shape(tags, bad_tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(tags=bad_tags), tags)
    assert exc.value.rule == "tags"
    assert "Bad showcase tags" in str(exc.value)


def test_unknown_tag(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(tags=["api", "nonexistent-tag"]), tags)
    assert exc.value.rule == "tags"
    msg = str(exc.value)
    assert "Unknown tags=[nonexistent-tag]" in msg
    assert "favorite,api,getstarted,library,operatortool" in msg


def test_getstarted_must_be_explicit(tags) -> None:
    entry = make_entry()
    del entry["getstarted"]
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(entry, tags)
    assert exc.value.rule == "getstarted"
    assert "getstarted: null" in str(exc.value)


def test_getstarted_tag_without_link(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(tags=["getstarted"], getstarted=None), tags)
    assert exc.value.rule == "getstarted"


def test_getstarted_link_without_tag(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(tags=["api"], getstarted="/docs/foo"), tags)
    assert exc.value.rule == "getstarted"


@pytest.mark.parametrize("value", ["", 42, ["/docs/foo"]])
def test_getstarted_wrong_type(tags, value) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(tags=["getstarted"], getstarted=value), tags)
    assert exc.value.rule == "getstarted"


def test_getstarted_link_with_tag(tags) -> None:
    ensure_valid(make_entry(tags=["getstarted", "library"], getstarted="/docs/get-started/example"), tags)


def test_operator_tool_getstarted_outside_prefix(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(tags=["getstarted", "operatortool"], getstarted="/docs/other/path"), tags)
    assert exc.value.rule == "operatortool"
    assert "operate-a-stake-pool" in str(exc.value)


def test_operator_tool_getstarted_under_prefix(tags) -> None:
    ensure_valid(make_entry(tags=["getstarted", "operatortool"], getstarted="/docs/operate-a-stake-pool/x"), tags)


def test_operator_tool_without_getstarted(tags) -> None:
    ensure_valid(make_entry(tags=["operatortool"], getstarted=None), tags)


def test_first_violation_wins(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid(make_entry(extra=1, website="ftp://x", tags=["nope"]), tags)
    assert exc.value.rule == "fields"


def test_non_mapping_entry(tags) -> None:
    with pytest.raises(ShowcaseError) as exc:
        ensure_valid("not an entry", tags)  # type: ignore[arg-type]
    assert exc.value.rule == "fields"


def test_collect_errors_reports_every_bad_entry(tags) -> None:
    entries = [
        make_entry(title="Good"),
        make_entry(title="Bad website", website="ftp://x"),
        make_entry(title="Also good"),
        make_entry(title="Bad tag", tags=["nonexistent-tag"]),
    ]
    errors = collect_errors(entries, tags)
    assert [e.title for e in errors] == ["Bad website", "Bad tag"]
    assert [e.rule for e in errors] == ["website", "tags"]


def test_collect_errors_empty_for_valid_entries(tags) -> None:
    assert collect_errors([make_entry(), make_entry(title="Other")], tags) == []
