"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from ptree.__main__ import main


def test_import():
    import ptree

    assert ptree.__version__


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Print a directory" in result.output
