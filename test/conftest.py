"""Shared fixtures for launcher tests."""

import json

import pytest


@pytest.fixture
def write_manifest(tmp_path):
    """Fixture to create package.json files below tmp_path.

    Usage:
        def test_something(write_manifest):
            path = write_manifest("pkg", {"scripts": {"test": "echo hi"}})
    """

    def _write(relative_dir: str = ".", data=None, raw: str | None = None):
        directory = tmp_path / relative_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "package.json"
        path.write_text(raw if raw is not None else json.dumps(data or {}), encoding="utf-8")
        return path

    return _write
