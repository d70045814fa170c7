"""
Self-contained file discovery and inclusion policy for static assets.

No imports from `static_publish` outside this package.

Usage::

    from static_publish.file_resolver import FileResolver, ResolvedRoots, list_files

    roots = ResolvedRoots.from_dirs(
        public_root=Path("/app/public"),
        output_dir=Path("/app/src"),
        static_dirs=["static"],
    )
    files = FileResolver(roots).resolve(list_files(roots.public_root))
"""

from static_publish.file_resolver.defaults import DEFAULT_EXCLUDE_DIRS, DEFAULT_INCLUDE_DIRS
from static_publish.file_resolver.resolver import FileResolver, list_files
from static_publish.file_resolver.types import ResolvedFile, ResolvedRoots, Verdict

__all__ = [
    "DEFAULT_EXCLUDE_DIRS",
    "DEFAULT_INCLUDE_DIRS",
    "FileResolver",
    "ResolvedFile",
    "ResolvedRoots",
    "Verdict",
    "list_files",
]
