"""Tests for script extraction from package manifests."""

import json
from pathlib import Path

import pytest

from launcher import CommandEntry, ManifestError, extract_scripts
from launcher.parser import split_scripts


def test_extracts_string_scripts_in_document_order(write_manifest) -> None:
    path = write_manifest(
        "pkg",
        {"name": "pkg", "scripts": {"build": "tsc -p .", "test": "jest", "lint": "eslint ."}},
    )

    entries = extract_scripts(path)

    assert entries == [
        CommandEntry(name="build", origin_dir=path.parent, command_text="tsc -p ."),
        CommandEntry(name="test", origin_dir=path.parent, command_text="jest"),
        CommandEntry(name="lint", origin_dir=path.parent, command_text="eslint ."),
    ]


def test_non_string_values_are_dropped(write_manifest) -> None:
    path = write_manifest(
        ".",
        {
            "scripts": {
                "build": "vite build",
                "nested": {"command": "x"},
                "count": 3,
                "flag": True,
                "nothing": None,
                "list": ["a", "b"],
                "dev": "vite",
            }
        },
    )

    entries = extract_scripts(path)

    assert [(e.name, e.command_text) for e in entries] == [("build", "vite build"), ("dev", "vite")]


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"name": "no-scripts"},
        {"scripts": None},
        {"scripts": "npm test"},
        {"scripts": ["build", "test"]},
        {"scripts": {}},
        [],
        "just a string",
        42,
    ],
)
def test_missing_or_non_object_scripts_yield_nothing(write_manifest, data) -> None:
    path = write_manifest(".", raw=json.dumps(data))
    assert extract_scripts(path) == []


def test_empty_name_or_command_is_skipped() -> None:
    assert split_scripts({"scripts": {"": "echo", "noop": "", "ok": "echo ok"}}) == [
        ("ok", "echo ok")
    ]


def test_malformed_json_raises_manifest_error(write_manifest) -> None:
    path = write_manifest(".", raw='{"scripts": {"build": "tsc",}')

    with pytest.raises(ManifestError) as exc_info:
        extract_scripts(path)

    assert exc_info.value.path == path
    assert "line 1" in str(exc_info.value)


def test_missing_file_raises_manifest_error(tmp_path) -> None:
    with pytest.raises(ManifestError):
        extract_scripts(tmp_path / "package.json")


def test_invalid_utf8_raises_manifest_error(tmp_path) -> None:
    path = tmp_path / "package.json"
    path.write_bytes(b'{"scripts": {"a": "\xff\xfe"}}')

    with pytest.raises(ManifestError):
        extract_scripts(path)


def test_bare_filename_uses_current_directory(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    Path("package.json").write_text('{"scripts": {"start": "node ."}}', encoding="utf-8")

    entries = extract_scripts(Path("package.json"))

    assert entries == [CommandEntry(name="start", origin_dir=Path("."), command_text="node .")]
    assert str(entries[0].origin_dir) == "."
