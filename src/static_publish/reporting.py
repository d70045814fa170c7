"""Console diagnostics: informational lines to stdout, warnings and errors to stderr."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Reporter:
    """
    `quiet` suppresses informational lines only; warnings and errors always print.
    """

    quiet: bool = False

    def info(self, message: str) -> None:
        if not self.quiet:
            print(message)

    def warn(self, message: str) -> None:
        print(f"Warning: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        print(f"✗ Error: {message}", file=sys.stderr)

    def hint(self, message: str) -> None:
        print(message, file=sys.stderr)
