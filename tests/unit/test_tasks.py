"""
Tests for the render/show command line tasks.
"""

import pytest
from invoke import MockContext

from webpack_config.tasks import namespace, render, show


def test_namespace_exposes_tasks():
    assert set(namespace.task_names) == {"render", "show"}


def test_render_writes_module(options_file, tmp_path):
    path = options_file(
        "requires:\n"
        "  path: path\n"
        "entry: ./src/index.js\n"
        "output:\n"
        "  path: !js path.resolve(__dirname, 'dist')\n"
    )
    output = tmp_path / "out" / "webpack.config.js"

    render(MockContext(), options=str(path), output=str(output))

    source = output.read_text(encoding="utf-8")
    assert source.startswith('const path = require("path");\n')
    assert "path: path.resolve(__dirname, 'dist')," in source
    assert 'entry: "./src/index.js",' in source
    assert "requires" not in source.split("module.exports", 1)[1]


def test_show_prints_module(options_file, capsys):
    path = options_file("mode: production\n")

    show(MockContext(), options=str(path))

    captured = capsys.readouterr()
    assert captured.out.startswith("module.exports = {")
    assert 'mode: "production",' in captured.out
    assert "Rendered config" in captured.err


def test_missing_options_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        show(MockContext(), options=str(tmp_path / "missing.yaml"))

    assert excinfo.value.code == 1
    assert "Options file not found" in capsys.readouterr().err


def test_invalid_options_reported(options_file, capsys):
    path = options_file("rules: not-a-list\n")

    with pytest.raises(SystemExit) as excinfo:
        show(MockContext(), options=str(path))

    assert excinfo.value.code == 1
    assert "Invalid webpack options" in capsys.readouterr().err


def test_malformed_requires_reported(options_file, capsys):
    path = options_file("requires: [path]\nmode: production\n")

    with pytest.raises(SystemExit) as excinfo:
        show(MockContext(), options=str(path))

    assert excinfo.value.code == 1
    assert "Cannot render webpack config" in capsys.readouterr().err
