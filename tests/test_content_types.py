"""Tests for content-type classification."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from static_publish.content_types import (
    CONTENT_TYPE_RULES,
    UNKNOWN_CONTENT_TYPE,
    ContentType,
    ContentTypeRule,
    classify,
)

# One sample name per extension alternative, with the expected classification.
_SAMPLES: list[tuple[str, str, bool]] = [
    ("notes.txt", "text/plain", False),
    ("index.html", "text/html", False),
    ("legacy.htm", "text/html", False),
    ("feed.xml", "application/xml", False),
    ("data.json", "application/json", False),
    ("app.js.map", "application/json", False),
    ("app.js", "application/javascript", False),
    ("module.mjs", "application/javascript", False),
    ("site.css", "text/css", False),
    ("logo.svg", "image/svg+xml", False),
    ("site.webmanifest", "application/manifest+json", False),
    ("old.bmp", "image/bmp", True),
    ("logo.png", "image/png", True),
    ("spinner.gif", "image/gif", True),
    ("photo.jpg", "image/jpeg", True),
    ("photo.jpeg", "image/jpeg", True),
    ("favicon.ico", "image/vnd.microsoft.icon", True),
    ("scan.tif", "image/tiff", True),
    ("scan.tiff", "image/tiff", True),
    ("hero.webp", "image/webp", True),
    ("clip.aac", "audio/aac", True),
    ("song.mp3", "audio/mpeg", True),
    ("movie.avi", "video/x-msvideo", True),
    ("movie.mp4", "video/mp4", True),
    ("movie.mpeg", "video/mpeg", True),
    ("movie.webm", "video/webm", True),
    ("manual.pdf", "application/pdf", True),
    ("bundle.tar", "application/x-tar", True),
    ("bundle.zip", "application/zip", True),
    ("engine.wasm", "application/wasm", True),
    ("font.eot", "application/vnd.ms-fontobject", True),
    ("font.otf", "font/otf", True),
    ("font.ttf", "font/ttf", True),
    ("font.woff", "font/woff", True),
    ("font.woff2", "font/woff2", True),
]


def _first_rule_index(name: str) -> int | None:
    for i, rule in enumerate(CONTENT_TYPE_RULES):
        if rule.matches(name):
            return i
    return None


@pytest.mark.parametrize(("name", "mime_type", "binary"), _SAMPLES)
def test_classify_known_extensions(name: str, mime_type: str, binary: bool) -> None:
    assert classify(name) == ContentType(mime_type=mime_type, binary=binary)


def test_every_rule_is_reachable() -> None:
    """Each rule is the first match for at least one sample, so no rule is shadowed."""
    matched = {_first_rule_index(name) for name, _, _ in _SAMPLES}
    assert matched == set(range(len(CONTENT_TYPE_RULES)))


def test_each_sample_matches_exactly_one_rule() -> None:
    for name, _, _ in _SAMPLES:
        matches = [rule for rule in CONTENT_TYPE_RULES if rule.matches(name)]
        assert len(matches) == 1, name


def test_js_does_not_match_json() -> None:
    assert classify("config.json").mime_type == "application/json"
    assert classify("config.jsonp") is UNKNOWN_CONTENT_TYPE


def test_extension_must_be_anchored_at_end() -> None:
    assert classify("index.html.bak") is UNKNOWN_CONTENT_TYPE
    assert classify("style.css.gz") is UNKNOWN_CONTENT_TYPE


def test_dot_is_literal() -> None:
    assert classify("mytxt") is UNKNOWN_CONTENT_TYPE
    assert classify("xpng") is UNKNOWN_CONTENT_TYPE


def test_matching_is_case_sensitive() -> None:
    assert classify("LOGO.PNG") is UNKNOWN_CONTENT_TYPE


def test_unknown_is_binary() -> None:
    result = classify("token")
    assert result is UNKNOWN_CONTENT_TYPE
    assert not result.is_known
    assert result.binary


def test_classify_uses_file_name_only() -> None:
    assert classify(Path("/srv/site.css/readme")) is UNKNOWN_CONTENT_TYPE
    assert classify(Path("/srv/assets.d/app.js")).mime_type == "application/javascript"


def test_first_match_wins_with_custom_rules() -> None:
    generic = ContentTypeRule(re.compile(r"\.gz$"), ContentType("application/gzip", True))
    specific = ContentTypeRule(re.compile(r"\.tar\.gz$"), ContentType("application/x-tar", True))
    assert classify("a.tar.gz", rules=(generic, specific)).mime_type == "application/gzip"
    assert classify("a.tar.gz", rules=(specific, generic)).mime_type == "application/x-tar"
