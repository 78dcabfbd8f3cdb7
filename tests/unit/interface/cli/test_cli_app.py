from __future__ import annotations

"""
Unit tests for the CLI controller.

Runs the controller in-process and checks rendering, exit codes and error
reporting for each sub-command.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from sharedfolder.interface.cli.app import main


@pytest.fixture(autouse=True)
def _isolated_logging(reset_logging):
    yield


def run(capsys, *argv: str):
    code = main(["--use-defaults", *argv])
    out, err = capsys.readouterr()
    return code, out, err


def test_walk_json_output(shared_folder: Path, capsys) -> None:
    code, out, _ = run(capsys, "-s", str(shared_folder), "--json", "walk", ".")

    assert code == 0
    assert json.loads(out) == {"a.txt": False, "sub/b.bin": True, "sub/deep/c.md": False}


def test_walk_human_output(shared_folder: Path, capsys) -> None:
    code, out, _ = run(capsys, "-s", str(shared_folder), "walk", "sub")

    assert code == 0
    assert out.splitlines() == ["binary  sub/b.bin", "text    sub/deep/c.md"]


def test_list_json_output(shared_folder: Path, capsys) -> None:
    code, out, _ = run(capsys, "-s", str(shared_folder), "--json", "list", str(shared_folder))

    assert code == 0
    assert json.loads(out) == {
        "a.txt": {"isDirectory": False},
        "sub": {"isDirectory": True},
    }


def test_absolute_and_relative_commands(tmp_path: Path, capsys) -> None:
    root = str(tmp_path)

    code, out, _ = run(capsys, "-s", root, "absolute", "a/../b/c.txt")
    assert code == 0
    assert out.strip() == str(tmp_path / "b" / "c.txt")

    code, out, _ = run(capsys, "-s", root, "--json", "relative", str(tmp_path / "b" / "c.txt"))
    assert code == 0
    assert json.loads(out) == {"result": "b/c.txt"}


def test_domain_command_branches(capsys) -> None:
    code, out, _ = run(capsys, "domain", "https://www.example.com:8080/path")
    assert code == 0
    assert out.strip() == "https://www.example.com"

    code, out, err = run(capsys, "domain", "/no/host")
    assert code == 1
    assert out == ""
    assert "No domain found" in err


def test_missing_directory_reports_filesystem_error(tmp_path: Path, capsys) -> None:
    code, _, err = run(capsys, "-s", str(tmp_path), "walk", "does-not-exist")

    assert code == 2
    assert "ERROR:" in err


def test_unexpected_failure_exits_with_one(tmp_path: Path, capsys) -> None:
    with patch("sharedfolder.interface.cli.app.walk_sync", side_effect=RuntimeError("boom")):
        code, _, err = run(capsys, "-s", str(tmp_path), "walk", ".")

    assert code == 1
    assert "boom" in err


def test_dump_config(tmp_path: Path, capsys) -> None:
    code, out, _ = run(capsys, "-s", str(tmp_path), "--dump-config")

    assert code == 0
    assert json.loads(out)["shared_folder"] == str(tmp_path)


def test_no_command_prints_usage(capsys) -> None:
    code, _, err = run(capsys)

    assert code == 2
    assert "usage:" in err
