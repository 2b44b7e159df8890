"""Tests for the slashcmd CLI: list, run, init."""

import os

import pytest
from click.testing import CliRunner

from slashcmd.__main__ import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path, monkeypatch):
    cmds_dir = tmp_path / ".gemini" / "commands"
    cmds_dir.mkdir(parents=True)
    (cmds_dir / "deploy.toml").write_text('description = "Ship it"\n')
    (cmds_dir / "broken.toml").write_text("description = [unterminated\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestList:
    def test_lists_builtin_and_custom(self, runner, project):
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "/deploy" in result.output
        assert "Ship it" in result.output
        assert "custom" in result.output
        assert "/help" in result.output

    def test_broken_file_reported_not_fatal(self, runner, project):
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        rows = [line.strip() for line in result.output.splitlines()]
        assert not any(row.startswith("/broken") for row in rows)
        assert "Failed to load custom command from" in result.output

    def test_verbose_summarises_skipped_files(self, runner, project):
        result = runner.invoke(cli, ["-v", "list"])
        assert result.exit_code == 0
        assert "1 command file(s) skipped" in result.output

    def test_no_project(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "no .gemini directory found" in result.output
        assert "/help" in result.output


class TestRun:
    def test_custom_command_prints_prompt(self, runner, project):
        result = runner.invoke(cli, ["run", "deploy", "to", "prod"])
        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1] == "deploy"

    def test_leading_slash_accepted(self, runner, project):
        result = runner.invoke(cli, ["run", "/deploy"])
        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1] == "deploy"

    def test_builtin_message(self, runner, project):
        result = runner.invoke(cli, ["run", "quit"])
        assert result.exit_code == 0
        assert "quit" in result.output

    def test_unknown_command_exits_nonzero(self, runner, project):
        result = runner.invoke(cli, ["run", "nope"])
        assert result.exit_code == 1
        assert "unknown command: /nope" in result.output


class TestInit:
    def test_scaffolds_project(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["init"])
        assert result.exit_code == 0
        assert "created" in result.output
        assert os.path.exists(tmp_path / ".gemini" / "commands" / "hello.toml")

        result = runner.invoke(cli, ["run", "hello"])
        assert result.output.strip().splitlines()[-1] == "hello"

    def test_second_init_is_noop(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner.invoke(cli, ["init"])
        result = runner.invoke(cli, ["init"])
        assert "already initialized" in result.output
