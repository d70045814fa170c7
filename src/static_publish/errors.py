"""Error types for static-publish."""

from __future__ import annotations

from pathlib import Path


class StaticPublishError(Exception):
    """Base class for all fatal static-publish errors."""


class ConfigMissingError(StaticPublishError):
    """The config file could not be read."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        message = f"Can't read {path.name}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigMalformedError(StaticPublishError):
    """The config file could be read but is not a valid config."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Can't parse {path.name}: {reason}")


class AssetReadError(StaticPublishError):
    """A file selected for publishing could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Can't read asset {path}: {reason}")


class PublicDirMissingError(StaticPublishError):
    """The configured public directory does not exist or is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Public directory '{path}' is not a directory")
