#!/usr/bin/env python3
"""
static-publish: Embed a directory of static web assets into a generated Python module

Common usage:
  static-publish
  static-publish --output app/statics.py
  static-publish --list-files

Reads `static-publish.json` (or `[tool.static-publish]` in `pyproject.toml`) from
the current directory. Run it from your project directory before bundling.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from static_publish.config import CONFIG_FILENAME, find_config_file, load_config
from static_publish.errors import (
    ConfigMalformedError,
    ConfigMissingError,
    StaticPublishError,
)
from static_publish.publish import DEFAULT_OUTPUT, build_static_loader, collect_files
from static_publish.reporting import Reporter

_RUN_HINT = "Run this from a static-publish project directory."


@dataclass
class Options:
    """Command-line options for the static-publish tool."""

    config: str | None
    output: str
    list_files: bool
    quiet: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> Options:
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="PATH",
        help=f"Config file to use (default: {CONFIG_FILENAME}, or pyproject.toml "
        "with a [tool.static-publish] table, in the current directory)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=str(DEFAULT_OUTPUT),
        help="Generated module to write; files in its directory are never published "
        "(default: %(default)s)",
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print the public paths that would be published, without writing anything",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print warnings and errors",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    return Options(
        config=opts.config,
        output=opts.output,
        list_files=opts.list_files,
        quiet=opts.quiet,
        version=opts.version,
    )


def _find_config(options: Options) -> Path:
    if options.config is not None:
        return Path(options.config)
    config_path = find_config_file(Path.cwd())
    if config_path is None:
        raise ConfigMissingError(Path(CONFIG_FILENAME), "no config file in current directory")
    return config_path


def _list_files(config_path: Path, output_path: Path) -> None:
    from static_publish.manifest import public_path

    config = load_config(config_path)
    roots, resolved_files = collect_files(
        config, config_path.parent, output_path, Reporter(quiet=True)
    )
    for resolved in resolved_files:
        line = public_path(resolved.path, roots.public_root)
        if resolved.is_static:
            line += " [STATIC]"
        print(line)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the static-publish CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("static-publish")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    reporter = Reporter(quiet=options.quiet)
    output_path = Path(options.output)

    try:
        config_path = _find_config(options)
        if options.list_files:
            _list_files(config_path, output_path)
        else:
            build_static_loader(config_path, output_path, reporter)
    except (ConfigMissingError, ConfigMalformedError) as e:
        reporter.error(str(e))
        reporter.hint(_RUN_HINT)
        return 1
    except StaticPublishError as e:
        reporter.error(str(e))
        return 1
    except OSError as e:
        # Failure writing the generated module
        reporter.error(str(e))
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
