"""
The publish pipeline: load config, enumerate the public directory, apply the
inclusion policy, and write the generated statics module.
"""

from __future__ import annotations

import os
from pathlib import Path

from static_publish.config import PublishConfig, load_config
from static_publish.errors import PublicDirMissingError
from static_publish.file_resolver import FileResolver, ResolvedFile, ResolvedRoots, list_files
from static_publish.file_resolver.types import absolute_dir
from static_publish.manifest import build_manifest, render_module, write_module
from static_publish.reporting import Reporter

DEFAULT_OUTPUT = Path("src/statics.py")


def resolve_roots(config: PublishConfig, config_dir: Path, output_path: Path) -> ResolvedRoots:
    """
    Resolve the public directory against the config file's directory, and the
    configured directories against the public directory. The output directory is
    the one holding the generated module. Both are symlink-resolved with
    `os.path.realpath` so they compare by prefix with each other.
    """
    public_root = Path(os.path.realpath(absolute_dir(config_dir, config.public_dir)))
    return ResolvedRoots.from_dirs(
        public_root=public_root,
        output_dir=Path(os.path.realpath(output_path)).parent,
        include_dirs=config.include_dirs,
        exclude_dirs=config.exclude_dirs,
        static_dirs=config.static_dirs,
    )


def _describe_dirs(reporter: Reporter, kind: str, dirs: list[str]) -> None:
    if dirs:
        reporter.info(f"Using {kind} directories: {', '.join(dirs)}")
    else:
        reporter.info(f"No {kind} directories defined.")


def collect_files(
    config: PublishConfig,
    config_dir: Path,
    output_path: Path,
    reporter: Reporter | None = None,
) -> tuple[ResolvedRoots, list[ResolvedFile]]:
    """Enumerate the public directory and return the files to publish."""
    reporter = reporter or Reporter()
    roots = resolve_roots(config, config_dir, output_path)
    if not roots.public_root.is_dir():
        raise PublicDirMissingError(roots.public_root)

    reporter.info(f"Public directory '{roots.public_root}'.")
    _describe_dirs(reporter, "static", config.static_dirs)
    _describe_dirs(reporter, "exclude", config.exclude_dirs)
    _describe_dirs(reporter, "include", config.include_dirs)

    resolver = FileResolver(roots)
    return roots, resolver.resolve(list_files(roots.public_root))


def build_static_loader(
    config_path: Path,
    output_path: Path = DEFAULT_OUTPUT,
    reporter: Reporter | None = None,
) -> int:
    """
    Run the whole pipeline and return the number of files written.

    Config and asset errors propagate as `StaticPublishError` before anything is
    written, so a failed run leaves any previous output untouched.
    """
    reporter = reporter or Reporter()
    reporter.info("Building loader...")

    config = load_config(config_path)
    roots, resolved_files = collect_files(config, config_path.parent, output_path, reporter)

    assets = build_manifest(resolved_files, roots.public_root, reporter=reporter)

    reporter.info(f"Application {'IS' if config.spa else 'IS NOT'} a SPA.")
    write_module(render_module(assets, is_spa=config.spa), output_path)

    reporter.info(f"✓ Wrote static file loader for {len(assets)} file(s) to {output_path}.")
    return len(assets)
