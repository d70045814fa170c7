"""
Default include and exclude directories, relative to the public directory.
"""

from __future__ import annotations

# Dependency install directory; never worth publishing.
DEFAULT_EXCLUDE_DIRS: list[str] = ["./node_modules"]

# Hidden directories that should still be served (e.g. ACME challenges,
# `security.txt`). Include roots also override the hidden-file rule.
DEFAULT_INCLUDE_DIRS: list[str] = ["./.well-known"]
