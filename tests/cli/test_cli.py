import json
import logging
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from depgraph import cli

SNAPSHOT = {
    "suites": [
        {
            "name": "smoke",
            "results": [
                {
                    "methods": [
                        {
                            "class": "com.example.Foo",
                            "name": "testA",
                            "status": "passed",
                            "depends_on_methods": ["com.example.Bar.testB"],
                        },
                        {"class": "com.example.Bar", "name": "testB", "status": "failed"},
                    ]
                }
            ],
        },
        {"name": "empty"},
    ]
}


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
    return path


def test_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "render" in capsys.readouterr().out


def test_render_writes_one_file_per_suite(tmp_path: Path, snapshot_file: Path, capsys) -> None:
    out = tmp_path / "out"
    cli.main(["render", str(snapshot_file), "--output", str(out), "--no-render"])

    smoke = out / "smoke" / "dependency_graph.dot"
    assert smoke.exists()
    assert "Foo_testA -> Bar_testB" in smoke.read_text(encoding="utf-8")
    assert (out / "empty" / "dependency_graph.dot").exists()

    captured = capsys.readouterr().out
    assert f"OK    smoke: {smoke}" in captured


@patch("depgraph.renderer.subprocess.Popen")
def test_render_passes_renderer_options(mock_popen, tmp_path: Path, snapshot_file: Path) -> None:
    mock_popen.return_value = Mock(pid=1)
    out = tmp_path / "out"
    cli.main(
        ["render", str(snapshot_file), "-o", str(out), "--renderer", "neato", "--format", "svg"]
    )

    commands = [call.args[0] for call in mock_popen.call_args_list]
    assert len(commands) == 2
    assert commands[0][:2] == ["neato", "-Tsvg"]
    assert commands[0][2] == f"-o{out / 'smoke' / 'dependency_graph.svg'}"


def test_missing_snapshot_exits_with_error(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["render", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1
    assert "Snapshot file not found" in capsys.readouterr().out


def test_invalid_snapshot_exits_with_error(tmp_path: Path, capsys) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("suites:\n  - output_dir: x\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["render", str(bad)])
    assert exc_info.value.code == 1
    assert "Failed to load snapshot" in capsys.readouterr().out


def test_write_failure_is_reported_not_fatal(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    snapshot = tmp_path / "s.yaml"
    snapshot.write_text(
        f"suites:\n  - name: broken\n    output_dir: {blocker}\n  - name: ok\n",
        encoding="utf-8",
    )

    cli.main(["render", str(snapshot), "-o", str(tmp_path / "out"), "--no-render"])

    captured = capsys.readouterr().out
    assert "FAIL  broken:" in captured
    assert "OK    ok:" in captured
    assert (tmp_path / "out" / "ok" / "dependency_graph.dot").exists()


def test_verbose_and_quiet_switch_levels(caplog, snapshot_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    with caplog.at_level(logging.DEBUG, logger="depgraph"):
        cli.main(["--verbose", "render", str(snapshot_file), "-o", str(out), "--no-render"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="depgraph"):
        cli.main(["--quiet", "render", str(snapshot_file), "-o", str(out), "--no-render"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_unreadable_snapshot_exits_with_error(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["render", str(tmp_path)])
    assert exc_info.value.code == 1
    assert "ERROR: Failed to read snapshot" in capsys.readouterr().out
