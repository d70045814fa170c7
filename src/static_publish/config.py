"""
Config file loading for static-publish.

Reads `static-publish.json`, or `pyproject.toml [tool.static-publish]`, from the
project directory. Keys may be camelCase (as in the JSON file), kebab-case (as is
usual in TOML), or snake_case. Keys that are absent or `null` take their defaults;
an explicit empty list means "no directories".
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, cast

from static_publish.errors import ConfigMalformedError, ConfigMissingError
from static_publish.file_resolver.defaults import DEFAULT_EXCLUDE_DIRS, DEFAULT_INCLUDE_DIRS

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

CONFIG_FILENAME = "static-publish.json"

_PYPROJECT_FILENAME = "pyproject.toml"
_PYPROJECT_SECTION = "static-publish"

# Config file search order within the project directory (first match wins)
_CONFIG_FILENAMES = [CONFIG_FILENAME, _PYPROJECT_FILENAME]

# Mapping from camelCase and kebab-case keys to Python snake_case field names
_KEY_ALIASES: dict[str, str] = {
    "publicDir": "public_dir",
    "staticDirs": "static_dirs",
    "excludeDirs": "exclude_dirs",
    "includeDirs": "include_dirs",
    "public-dir": "public_dir",
    "static-dirs": "static_dirs",
    "exclude-dirs": "exclude_dirs",
    "include-dirs": "include_dirs",
}

_DIR_LIST_FIELDS = ("static_dirs", "exclude_dirs", "include_dirs")


@dataclass(frozen=True)
class PublishConfig:
    """
    Parsed publish config. Directory lists are relative to `public_dir`.
    """

    public_dir: str
    static_dirs: list[str] = field(default_factory=list)
    exclude_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    include_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE_DIRS))
    spa: bool = False


_VALID_FIELDS = {f.name for f in fields(PublishConfig)}


def find_config_file(directory: Path) -> Path | None:
    """
    Look for a config file in `directory` (not its parents). Search order:
    `static-publish.json` > `pyproject.toml` (only if it has
    `[tool.static-publish]`).
    """
    for filename in _CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            if filename == _PYPROJECT_FILENAME:
                if _pyproject_has_section(candidate):
                    return candidate
            else:
                return candidate
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.static-publish] section."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return _PYPROJECT_SECTION in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError):
        return False


def load_config(config_path: Path) -> PublishConfig:
    """
    Load a `PublishConfig` from `static-publish.json` or a `pyproject.toml`.

    Raises `ConfigMissingError` if the file can't be read and
    `ConfigMalformedError` if its content isn't a valid config.
    """
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigMissingError(config_path, getattr(e, "strerror", None) or str(e)) from e

    if config_path.name == _PYPROJECT_FILENAME:
        try:
            data: Any = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigMalformedError(config_path, str(e)) from e
        data = data.get("tool", {}).get(_PYPROJECT_SECTION)
        if data is None:
            raise ConfigMalformedError(config_path, "no [tool.static-publish] section")
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigMalformedError(config_path, str(e)) from e

    return _parse_config_data(data, config_path)


def _parse_config_data(data: Any, config_path: Path) -> PublishConfig:
    """Validate raw parsed data and build a PublishConfig."""
    if not isinstance(data, dict):
        raise ConfigMalformedError(config_path, "expected an object at top level")

    mapped: dict[str, Any] = {}
    for key, value in cast(dict[str, Any], data).items():
        snake_key = _KEY_ALIASES.get(key, key.replace("-", "_"))
        # null means "not set", same as an absent key
        if snake_key in _VALID_FIELDS and value is not None:
            mapped[snake_key] = value

    public_dir = mapped.get("public_dir")
    if not isinstance(public_dir, str) or not public_dir:
        raise ConfigMalformedError(config_path, "'publicDir' must be a non-empty string")

    for name in _DIR_LIST_FIELDS:
        if name in mapped:
            value = mapped[name]
            if not isinstance(value, list) or not all(
                isinstance(item, str) for item in cast(list[Any], value)
            ):
                raise ConfigMalformedError(config_path, f"'{name}' must be a list of strings")
            mapped[name] = list(cast(list[str], value))

    if "spa" in mapped and not isinstance(mapped["spa"], bool):
        raise ConfigMalformedError(config_path, "'spa' must be true or false")

    return PublishConfig(**mapped)
