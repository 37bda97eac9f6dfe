"""Tests for the external renderer adapter."""

import logging
from pathlib import Path
from unittest.mock import Mock, patch

from depgraph.config import ReporterConfig
from depgraph.renderer import render_command, render_image


def test_render_command_layout(tmp_path: Path):
    dot = tmp_path / "dependency_graph.dot"
    png = tmp_path / "dependency_graph.png"
    assert render_command(dot, png) == ["dot", "-Tpng", f"-o{png}", str(dot)]


def test_render_command_uses_config(tmp_path: Path):
    config = ReporterConfig(renderer_command="neato", image_format="svg")
    cmd = render_command(tmp_path / "g.dot", tmp_path / "g.svg", config)
    assert cmd[:2] == ["neato", "-Tsvg"]


def test_relative_paths_are_made_absolute():
    cmd = render_command(Path("out/g.dot"), Path("out/g.png"))
    assert Path(cmd[2][2:]).is_absolute()
    assert Path(cmd[3]).is_absolute()


@patch("depgraph.renderer.subprocess.Popen")
def test_render_image_does_not_wait(mock_popen, tmp_path: Path):
    process = Mock(pid=1234)
    mock_popen.return_value = process

    result = render_image(tmp_path / "g.dot", tmp_path / "g.png")

    assert result is process
    args = mock_popen.call_args[0][0]
    assert args[0] == "dot"
    process.wait.assert_not_called()
    process.communicate.assert_not_called()


@patch("depgraph.renderer.subprocess.Popen", side_effect=FileNotFoundError(2, "No such file"))
def test_missing_renderer_is_reported(mock_popen, tmp_path: Path, caplog):
    dot = tmp_path / "g.dot"
    png = tmp_path / "g.png"

    with caplog.at_level(logging.ERROR, logger="depgraph"):
        result = render_image(dot, png)

    assert result is None
    messages = [r.message for r in caplog.records if r.levelno == logging.ERROR]
    assert any("Error executing dot command" in m for m in messages)
    assert f"Command was: dot -Tpng -o{png} {dot}" in messages


def test_nonexistent_command_does_not_raise(tmp_path: Path, caplog):
    config = ReporterConfig(renderer_command="depgraph-no-such-renderer-xyz")
    with caplog.at_level(logging.ERROR, logger="depgraph"):
        result = render_image(tmp_path / "g.dot", tmp_path / "g.png", config)

    assert result is None
    assert any("depgraph-no-such-renderer-xyz" in r.message for r in caplog.records)


@patch(
    "depgraph.renderer.subprocess.Popen",
    side_effect=UnicodeEncodeError("utf-8", "\ud800", 0, 1, "surrogates not allowed"),
)
def test_unencodable_command_is_reported(mock_popen, tmp_path: Path, caplog):
    with caplog.at_level(logging.ERROR, logger="depgraph"):
        result = render_image(tmp_path / "g.dot", tmp_path / "g.png")

    assert result is None
    assert any(r.message.startswith("Command was: dot") for r in caplog.records)
