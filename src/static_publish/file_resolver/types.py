"""Types for file resolution."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


def absolute_dir(base: Path, relative: str | Path) -> Path:
    """
    Join `relative` onto `base` and normalize `.` and `..` lexically, without
    following symlinks, so the result compares by prefix with walked paths.
    """
    return Path(os.path.normpath(os.path.join(base, relative)))


@dataclass(frozen=True)
class ResolvedRoots:
    """
    Absolute directories used for prefix matching. All roots are normalized the
    same way as enumerated file paths; otherwise prefix checks silently fail.
    """

    public_root: Path
    output_dir: Path
    include_roots: tuple[Path, ...] = ()
    exclude_roots: tuple[Path, ...] = ()
    static_roots: tuple[Path, ...] = ()

    @classmethod
    def from_dirs(
        cls,
        public_root: Path,
        output_dir: Path,
        include_dirs: Sequence[str] = (),
        exclude_dirs: Sequence[str] = (),
        static_dirs: Sequence[str] = (),
    ) -> ResolvedRoots:
        """Resolve configured directories (relative to `public_root`) into roots."""
        return cls(
            public_root=public_root,
            output_dir=output_dir,
            include_roots=tuple(absolute_dir(public_root, d) for d in include_dirs),
            exclude_roots=tuple(absolute_dir(public_root, d) for d in exclude_dirs),
            static_roots=tuple(absolute_dir(public_root, d) for d in static_dirs),
        )


class Verdict(Enum):
    """Outcome of the inclusion policy for a single file, named by the deciding rule."""

    REJECT_OUTPUT = "reject_output"
    ACCEPT_INCLUDED = "accept_included"
    REJECT_HIDDEN = "reject_hidden"
    REJECT_EXCLUDED = "reject_excluded"
    ACCEPT = "accept"

    @property
    def accepted(self) -> bool:
        return self in (Verdict.ACCEPT_INCLUDED, Verdict.ACCEPT)


@dataclass(frozen=True)
class ResolvedFile:
    path: Path
    is_static: bool
