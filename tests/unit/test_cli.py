"""Command line behaviour through click's test runner."""

import json

import pytest
from click.testing import CliRunner

from jyrolint.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def script(tmp_path):
    def write(text, name="transform.jyro"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


def test_check_clean_file(runner, script):
    result = runner.invoke(cli, ["check", script("var x = 1\nData.y = x\n")])
    assert result.exit_code == 0
    assert "No problems found" in result.output


def test_check_reports_errors_and_exits_1(runner, script):
    path = script("while true do\n  Data.x = 1\n")
    result = runner.invoke(cli, ["check", path])
    assert result.exit_code == 1
    assert f"{path}:1:1: error: Unclosed \"while\" block" in result.output


def test_warnings_alone_exit_0(runner, script):
    result = runner.invoke(cli, ["check", script("Data.x = ghost\n")])
    assert result.exit_code == 0
    assert 'warning: Undefined variable "ghost"' in result.output


def test_json_output(runner, script):
    path = script("Data.r = Notify(1)\n")
    result = runner.invoke(cli, ["check", "--format", "json", path])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload[path][0]["severity"] == 3
    assert payload[path][0]["range"]["start"] == {"line": 0, "character": 9}


def test_no_host_functions_flag(runner, script):
    path = script("Data.r = Notify(1)\n")
    result = runner.invoke(cli, ["check", "--no-host-functions", "--format", "json", path])
    assert json.loads(result.output) == {path: []}


def test_inline_directive_respected(runner, script):
    path = script("# @jyro: warnOnHostFunctions=false\nData.r = Notify(1)\n")
    result = runner.invoke(cli, ["check", "--format", "json", path])
    assert json.loads(result.output) == {path: []}


def test_bad_inline_directive_is_reported(runner, script):
    path = script("# @jyro: warnOnHostFunctions=maybe\n")
    result = runner.invoke(cli, ["check", path])
    assert result.exit_code == 2
    assert "Error:" in result.output


def test_symbols_json(runner, script):
    path = script("var total: number = 0\nforeach o in Data.orders do\nend\n")
    result = runner.invoke(cli, ["symbols", "--format", "json", path])
    assert result.exit_code == 0
    assert json.loads(result.output) == [
        {"name": "total", "type": "number", "line": 0, "character": 4},
        {"name": "o", "type": "iterator", "line": 1, "character": 8},
    ]


def test_symbols_table(runner, script):
    result = runner.invoke(cli, ["symbols", script("var total = 0\n")])
    assert result.exit_code == 0
    assert "total" in result.output


def test_functions_by_category(runner):
    result = runner.invoke(cli, ["functions", "--category", "DateTime"])
    assert result.exit_code == 0
    assert "DateAdd" in result.output
    assert "Upper" not in result.output


def test_path_with_brackets_printed_verbatim(runner, script):
    path = script("while true do\n", name="[bold]flow.jyro")
    result = runner.invoke(cli, ["check", path])
    assert result.exit_code == 1
    assert f"{path}:1:1: error:" in result.output
