"""
Content-type classification by file extension.

Each ContentTypeRule pairs an end-anchored extension regex with the MIME type it
implies and whether the content is binary. Rules are checked in declaration order
and the first match wins, so every pattern must anchor on the full extension
(`.js` must never match `.json`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class ContentType:
    """
    A classification result. `mime_type` is `None` for unknown files, which are
    treated as binary.
    """

    mime_type: str | None
    binary: bool

    @property
    def is_known(self) -> bool:
        return self.mime_type is not None


UNKNOWN_CONTENT_TYPE = ContentType(mime_type=None, binary=True)


@dataclass(frozen=True)
class ContentTypeRule:
    pattern: re.Pattern[str]
    content_type: ContentType

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None


def _rule(extensions: str, mime_type: str, binary: bool) -> ContentTypeRule:
    """Build a rule from a regex fragment matching the extension (without the dot)."""
    return ContentTypeRule(
        pattern=re.compile(rf"\.(?:{extensions})$"),
        content_type=ContentType(mime_type=mime_type, binary=binary),
    )


CONTENT_TYPE_RULES: tuple[ContentTypeRule, ...] = (
    # Text formats
    _rule("txt", "text/plain", binary=False),
    _rule("html?", "text/html", binary=False),
    _rule("xml", "application/xml", binary=False),
    _rule("json", "application/json", binary=False),
    _rule("map", "application/json", binary=False),
    _rule("m?js", "application/javascript", binary=False),
    _rule("css", "text/css", binary=False),
    _rule("svg", "image/svg+xml", binary=False),
    _rule("webmanifest", "application/manifest+json", binary=False),
    # Binary formats
    _rule("bmp", "image/bmp", binary=True),
    _rule("png", "image/png", binary=True),
    _rule("gif", "image/gif", binary=True),
    _rule("jpe?g", "image/jpeg", binary=True),
    _rule("ico", "image/vnd.microsoft.icon", binary=True),
    _rule("tiff?", "image/tiff", binary=True),
    _rule("webp", "image/webp", binary=True),
    _rule("aac", "audio/aac", binary=True),
    _rule("mp3", "audio/mpeg", binary=True),
    _rule("avi", "video/x-msvideo", binary=True),
    _rule("mp4", "video/mp4", binary=True),
    _rule("mpeg", "video/mpeg", binary=True),
    _rule("webm", "video/webm", binary=True),
    _rule("pdf", "application/pdf", binary=True),
    _rule("tar", "application/x-tar", binary=True),
    _rule("zip", "application/zip", binary=True),
    _rule("wasm", "application/wasm", binary=True),
    _rule("eot", "application/vnd.ms-fontobject", binary=True),
    _rule("otf", "font/otf", binary=True),
    _rule("ttf", "font/ttf", binary=True),
    _rule("woff", "font/woff", binary=True),
    _rule("woff2", "font/woff2", binary=True),
)


def classify(
    path: str | PurePath, rules: tuple[ContentTypeRule, ...] = CONTENT_TYPE_RULES
) -> ContentType:
    """
    Return the content type of the first rule matching the file name of `path`,
    or `UNKNOWN_CONTENT_TYPE` if none match.
    """
    name = PurePath(path).name
    for rule in rules:
        if rule.matches(name):
            return rule.content_type
    return UNKNOWN_CONTENT_TYPE
