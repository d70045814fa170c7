"""Tests for CLI help and version output."""

from __future__ import annotations

import pytest

from static_publish.cli import main


def _render_help(capsys: pytest.CaptureFixture[str]) -> str:
    """Run `static-publish --help` via CLI entrypoint and return captured stdout."""
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    return capsys.readouterr().out


def test_help_includes_tagline(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "static-publish: Embed a directory of static web assets" in out


def test_help_includes_common_usage(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "Common usage:" in out
    assert "static-publish --list-files" in out
    assert "--output" in out
    assert "src/statics.py" in out


def test_version_prints_something(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("v") or "unknown" in out
