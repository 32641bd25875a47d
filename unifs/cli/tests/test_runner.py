"""Tests for the unifs command line runner."""

from __future__ import annotations

import json

import pytest

from unifs.cli.runner import _extract_global_flags, _parse_roots, run_cli, run_command


def _local(tmp_path) -> list[str]:
    return ["--fs", "local", "--env", json.dumps({"FS_LOCAL_ROOT": str(tmp_path)}), "--log", "noop"]


def test_extract_global_flags_splits_paths():
    flags, env, fs, roots, paths = _extract_global_flags(
        ["a.txt", "--fs", "memory", "--fs", "cold=local", "--root", "cold=r/", "b.txt",
         "--adapter", "cold", "--env", '{"X": "1"}', "--log", "memory"]
    )
    assert paths == ["a.txt", "b.txt"]
    assert fs == ["memory", "cold=local"]
    assert roots == ["cold=r/"]
    assert flags == {"adapter": "cold", "log": "memory"}
    assert env == {"X": "1", "LOG_IMPL": "memory"}


def test_unknown_flag():
    with pytest.raises(ValueError, match="Unknown flag"):
        _extract_global_flags(["--nope", "x"])


def test_env_must_be_string_map():
    with pytest.raises(ValueError, match="string keys"):
        _extract_global_flags(["--env", '{"X": 1}'])


def test_parse_roots():
    assert _parse_roots(["base/", "cold=archive/"]) == {"default": "base/", "cold": "archive/"}


def test_unknown_command():
    with pytest.raises(ValueError, match="Unknown command"):
        run_command(["frobnicate", "a.txt"])


def test_wrong_number_of_paths():
    with pytest.raises(ValueError, match="takes 2 path"):
        run_command(["cp", "a.txt"])


def test_write_then_read(tmp_path):
    code, payload = run_command(["write", "notes/a.txt", "--text", "hello", *_local(tmp_path)])
    assert code == 0
    assert payload == {"type": "file", "path": "notes/a.txt", "adapter": "default"}
    assert (tmp_path / "notes" / "a.txt").read_text() == "hello"

    _, payload = run_command(["read", "notes/a.txt", *_local(tmp_path)])
    assert payload["text"] == "hello"


def test_root_flag_prefixes_paths(tmp_path):
    (tmp_path / "tenant").mkdir()
    (tmp_path / "tenant" / "a.txt").write_text("x")
    _, payload = run_command(["cp", "a.txt", "b.txt", "--root", "tenant/", *_local(tmp_path)])
    assert payload == {"type": "file", "path": "b.txt", "adapter": "default"}
    assert (tmp_path / "tenant" / "b.txt").read_text() == "x"


def test_directory_commands(tmp_path):
    _, payload = run_command(["mkdir", "d/", *_local(tmp_path)])
    assert payload == {"type": "directory", "path": "d/", "adapter": "default"}
    _, payload = run_command(["mvdir", "d/", "e/", *_local(tmp_path)])
    assert payload["path"] == "e/"
    _, payload = run_command(["rmdir", "e/", *_local(tmp_path)])
    assert payload == {"deleted": "e/", "adapter": "default"}
    assert list(tmp_path.iterdir()) == []


def test_exists_on_memory_adapter():
    _, payload = run_command(["exists", "a.txt", "--fs", "memory", "--log", "noop"])
    assert payload == {"path": "a.txt", "adapter": "default", "exists": False}


def test_named_adapter(tmp_path):
    _, payload = run_command(
        ["touch", "a.txt", "--fs", "cold=memory", "--adapter", "cold", "--log", "noop"]
    )
    assert payload["adapter"] == "cold"


def test_run_cli_prints_json(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_cli(["touch", "a.txt", *_local(tmp_path)])
    assert exc_info.value.code == 0
    assert json.loads(capsys.readouterr().out) == {
        "type": "file",
        "path": "a.txt",
        "adapter": "default",
    }


def test_run_cli_reports_domain_errors(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_cli(["read", "missing.txt", *_local(tmp_path)])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.strip() == "error: not_found: File not found: missing.txt"


def test_run_cli_reports_validation_errors(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_cli(["read", "dir/", *_local(tmp_path)])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("error: path_is_a_directory:")


def test_run_cli_unknown_adapter(capsys):
    with pytest.raises(SystemExit):
        run_cli(["get", "a.txt", "--fs", "memory", "--adapter", "cold", "--log", "noop"])
    assert capsys.readouterr().err.startswith("error: adapter_not_found:")
