"""Tests for CLI functionality."""
from pathlib import Path

import pytest
from click.testing import CliRunner
from git import Repo

from glyphit import __version__
from glyphit.cli import main
from glyphit.models import PLACEHOLDER_MESSAGE


@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def repo_dir(empty_git_repo):
    path = Path(empty_git_repo.working_tree_dir)
    (path / "a.txt").write_text("a")
    return path


def test_version(cli_runner):
    result = cli_runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_add_requires_files(cli_runner, repo_dir):
    result = cli_runner.invoke(main, ["-p", str(repo_dir), "add"])

    assert result.exit_code == 2


def test_add_and_commit_non_interactive(cli_runner, repo_dir):
    result = cli_runner.invoke(main, ["-p", str(repo_dir), "add", "./a.txt"])
    assert result.exit_code == 0, result.output
    assert "Staged 1 file(s): a.txt" in result.output

    result = cli_runner.invoke(main, ["-p", str(repo_dir), "commit", "--non-interactive"])
    assert result.exit_code == 0, result.output

    assert Repo(repo_dir).head.commit.message == PLACEHOLDER_MESSAGE


def test_interactive_commit(cli_runner, repo_dir):
    cli_runner.invoke(main, ["-p", str(repo_dir), "add", "a.txt"])

    result = cli_runner.invoke(
        main,
        ["-p", str(repo_dir), "commit"],
        input="4\nFix parser\nMore detail\n\n",
    )

    assert result.exit_code == 0, result.output
    assert "Select an emoji for your commit:" in result.output
    assert Repo(repo_dir).head.commit.message == (
        "🐛Fix parser\nMore detail\nBREAKING CHANGES: \n"
    )


def test_catalog_from_repository_config(cli_runner, repo_dir):
    (repo_dir / ".glyphit.toml").write_text(
        '[glyphit]\nemoji_catalog = ["🚀 :rocket: Ship it"]\n', encoding="utf-8"
    )
    cli_runner.invoke(main, ["-p", str(repo_dir), "add", "a.txt"])

    result = cli_runner.invoke(
        main, ["-p", str(repo_dir), "commit"], input="1\nRelease\n\n\n"
    )

    assert result.exit_code == 0, result.output
    assert Repo(repo_dir).head.commit.message.startswith("🚀Release\n")


def test_broken_catalog_config_exits_with_error(cli_runner, repo_dir):
    (repo_dir / ".glyphit.toml").write_text('[glyphit]\ncatalog_file = "missing.toml"\n')

    result = cli_runner.invoke(main, ["-p", str(repo_dir), "commit", "--non-interactive"])

    assert result.exit_code == 1
    assert "Cannot read emoji catalog" in result.output


def test_add_missing_file_exits_with_error(cli_runner, repo_dir):
    result = cli_runner.invoke(main, ["-p", str(repo_dir), "add", "missing.txt"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_push_without_remote_exits_with_error(cli_runner, repo_dir):
    cli_runner.invoke(main, ["-p", str(repo_dir), "add", "a.txt"])
    cli_runner.invoke(main, ["-p", str(repo_dir), "commit", "--non-interactive"])

    result = cli_runner.invoke(main, ["-p", str(repo_dir), "push"])

    assert result.exit_code == 1
    assert "remote.origin.url is not configured" in result.output


def test_push_to_origin(cli_runner, temp_git_repo, remote_repo):
    temp_git_repo.create_remote("origin", remote_repo.git_dir)
    branch = temp_git_repo.active_branch.name

    result = cli_runner.invoke(main, ["-p", temp_git_repo.working_tree_dir, "push"])

    assert result.exit_code == 0, result.output
    assert remote_repo.heads[branch].commit.hexsha == temp_git_repo.head.commit.hexsha


def test_outside_repository(cli_runner, tmp_path):
    outside = tmp_path / "plain"
    outside.mkdir()

    result = cli_runner.invoke(main, ["-p", str(outside), "commit"])

    assert result.exit_code == 1
    assert "No git repository found" in result.output


def test_log_file_option(cli_runner, repo_dir, tmp_path):
    log_file = tmp_path / "ops.log"

    result = cli_runner.invoke(
        main, ["-p", str(repo_dir), "-l", str(log_file), "add", "a.txt"]
    )

    assert result.exit_code == 0, result.output
    assert "Staged: a.txt" in log_file.read_text(encoding="utf-8")


def test_config_lists_defaults(cli_runner, repo_dir):
    result = cli_runner.invoke(main, ["-p", str(repo_dir), "config"])

    assert result.exit_code == 0, result.output
    assert "Using default values" in result.output
    assert "66 labels" in result.output
    assert not (repo_dir / ".glyphit.toml").exists()


def test_config_init_creates_file(cli_runner, repo_dir):
    result = cli_runner.invoke(main, ["-p", str(repo_dir), "config", "--init"])

    assert result.exit_code == 0, result.output
    assert "Created new config file" in result.output
    content = (repo_dir / ".glyphit.toml").read_text(encoding="utf-8")
    assert "always_log = false" in content


def test_config_init_keeps_existing_file(cli_runner, repo_dir):
    (repo_dir / ".glyphit.toml").write_text(
        '[glyphit]\nemoji_catalog = ["🚀 :rocket: Ship it"]\n', encoding="utf-8"
    )

    result = cli_runner.invoke(main, ["-p", str(repo_dir), "config", "--init"])

    assert result.exit_code == 0, result.output
    assert "Created new config file" not in result.output
    assert "1 labels" in result.output
