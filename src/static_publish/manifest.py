"""
Manifest building and generated-module rendering.

Each published file becomes a `PublishedAsset` keyed by its public path (the path
below the public directory, POSIX-style with a leading `/`). The generated module
embeds binary content (including files of unknown type) as base64 and text
content as string literals.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import cache
from importlib.resources import files
from pathlib import Path

from jinja2 import Environment, StrictUndefined, Template
from strif import atomic_output_file

from static_publish.content_types import ContentType, classify
from static_publish.errors import AssetReadError
from static_publish.file_resolver import ResolvedFile
from static_publish.reporting import Reporter

_TEMPLATE_NAME = "templates/statics.py.jinja"


@dataclass(frozen=True)
class PublishedAsset:
    public_path: str
    content_type: ContentType
    is_static: bool
    content: str | bytes


def public_path(path: Path, public_root: Path) -> str:
    """Strip `public_root` from `path`, giving the runtime-facing lookup key."""
    return "/" + path.relative_to(public_root).as_posix()


def read_content(path: Path, content_type: ContentType) -> str | bytes:
    """Read a file as bytes if its type is binary (or unknown), otherwise as UTF-8 text."""
    try:
        if content_type.binary:
            return path.read_bytes()
        # Decode the raw bytes so line endings are kept exactly
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise AssetReadError(path, f"not valid UTF-8 for {content_type.mime_type}") from e
    except OSError as e:
        raise AssetReadError(path, e.strerror or str(e)) from e


def build_manifest(
    resolved_files: Iterable[ResolvedFile],
    public_root: Path,
    classifier: Callable[[Path], ContentType] = classify,
    reporter: Reporter | None = None,
) -> list[PublishedAsset]:
    """
    Classify and read each resolved file, logging one line per file (or a
    warning for unknown types). Order follows `resolved_files`.
    """
    reporter = reporter or Reporter()
    assets: list[PublishedAsset] = []
    for resolved in resolved_files:
        key = public_path(resolved.path, public_root)
        content_type = classifier(resolved.path)

        if content_type.is_known:
            line = f"{json.dumps(key)}: {json.dumps(content_type.mime_type)}"
            if resolved.is_static:
                line += " [STATIC]"
            reporter.info(line)
        else:
            reporter.warn(f"Unknown file type {json.dumps(key)}, embedding as binary")

        assets.append(
            PublishedAsset(
                public_path=key,
                content_type=content_type,
                is_static=resolved.is_static,
                content=read_content(resolved.path, content_type),
            )
        )
    return assets


def _py_literal(value: str | bool | None) -> str:
    return repr(value)


def _content_expr(asset: PublishedAsset) -> str:
    if isinstance(asset.content, bytes):
        encoded = base64.b64encode(asset.content).decode("ascii")
        return f"base64.b64decode({encoded!r})"
    return repr(asset.content)


@cache
def _load_template() -> Template:
    environment = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    environment.filters["py"] = _py_literal
    environment.filters["content_expr"] = _content_expr
    source = files("static_publish").joinpath(_TEMPLATE_NAME).read_text(encoding="utf-8")
    return environment.from_string(source)


def render_module(assets: Sequence[PublishedAsset], is_spa: bool) -> str:
    """Render the generated Python module source. Same input, same bytes."""
    return _load_template().render(assets=assets, is_spa=is_spa)


def write_module(content: str, output_path: Path) -> None:
    """Write the generated module atomically, replacing any previous version."""
    with atomic_output_file(output_path, make_parents=True) as temp_path:
        Path(temp_path).write_text(content, encoding="utf-8")
