"""
FileResolver: decides which enumerated files are published and which are static.

The inclusion policy is an ordered chain of guards; the first guard that applies
decides. Order matters: include roots override the hidden-file rule, and the
output directory overrides everything.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from static_publish.file_resolver.types import ResolvedFile, ResolvedRoots, Verdict


def list_files(root: Path) -> list[Path]:
    """
    Recursively list every non-directory entry under `root` as an absolute path.

    Order is depth-first and deterministic: files of a directory in sorted name
    order, then its subdirectories in sorted order. Symlinked directories are not
    followed.
    """
    root = Path(os.path.abspath(root))
    result: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Sort in-place so os.walk() descends in a stable order
        dirnames.sort()
        current = Path(dirpath)
        for filename in sorted(filenames):
            result.append(current / filename)
    return result


def _starts_with(path: Path, root: Path) -> bool:
    """Plain string-prefix test on absolute paths."""
    return str(path).startswith(str(root))


class FileResolver:
    """
    Applies the inclusion policy and static tagging for a fixed set of roots.
    """

    def __init__(self, roots: ResolvedRoots) -> None:
        self._roots: ResolvedRoots = roots

    @property
    def roots(self) -> ResolvedRoots:
        return self._roots

    def decide(self, path: Path) -> Verdict:
        """Evaluate the inclusion guards in order and return the first decisive one."""
        if _starts_with(path, self._roots.output_dir):
            return Verdict.REJECT_OUTPUT
        if any(_starts_with(path, root) for root in self._roots.include_roots):
            return Verdict.ACCEPT_INCLUDED
        if self._is_hidden(path):
            return Verdict.REJECT_HIDDEN
        if any(_starts_with(path, root) for root in self._roots.exclude_roots):
            return Verdict.REJECT_EXCLUDED
        return Verdict.ACCEPT

    def is_static(self, path: Path) -> bool:
        """Static tagging is independent of which guard accepted the file."""
        return any(_starts_with(path, root) for root in self._roots.static_roots)

    def resolve(self, files: Iterable[Path]) -> list[ResolvedFile]:
        """
        Filter `files` down to those to publish, tagging each as static or not.
        Input order is preserved.
        """
        return [
            ResolvedFile(path=path, is_static=self.is_static(path))
            for path in files
            if self.decide(path).accepted
        ]

    def _is_hidden(self, path: Path) -> bool:
        """
        True if any segment below the public root starts with a dot. Segments
        above the public root (e.g. a checkout under `~/.cache`) don't count.
        """
        try:
            parts = path.relative_to(self._roots.public_root).parts
        except ValueError:
            parts = path.parts
        return any(part.startswith(".") for part in parts)
