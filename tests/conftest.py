import pytest
from pathlib import Path
from git import Repo


def set_identity(repo, name="Test User", email="test@example.com"):
    with repo.config_writer() as writer:
        writer.set_value("user", "name", name)
        writer.set_value("user", "email", email)


@pytest.fixture(autouse=True)
def isolated_git_config(tmp_path_factory, monkeypatch):
    """Keep the developer's global git config and glyphit settings out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for var in (
        "GIT_AUTHOR_NAME",
        "GIT_AUTHOR_EMAIL",
        "GIT_AUTHOR_DATE",
        "GIT_COMMITTER_NAME",
        "GIT_COMMITTER_EMAIL",
        "GIT_COMMITTER_DATE",
        "GLYPHIT_ALWAYS_LOG",
        "GLYPHIT_LOG_FILE",
        "GLYPHIT_CATALOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    yield home


@pytest.fixture
def anonymous_git_repo(tmp_path):
    """Create an empty repository without any configured identity."""
    return Repo.init(tmp_path / "work")


@pytest.fixture
def empty_git_repo(anonymous_git_repo):
    """Create an empty repository (unborn branch) with an author identity."""
    set_identity(anonymous_git_repo)
    return anonymous_git_repo


@pytest.fixture
def temp_git_repo(empty_git_repo):
    """Create a repository with one commit containing test.txt."""
    test_file = Path(empty_git_repo.working_tree_dir) / "test.txt"
    test_file.write_text("Initial content")
    empty_git_repo.index.add(["test.txt"])
    empty_git_repo.index.commit("Initial commit")
    return empty_git_repo


@pytest.fixture
def temp_git_repo_detached_head(temp_git_repo):
    """Create a repository in detached HEAD state."""
    test_file = Path(temp_git_repo.working_tree_dir) / "test.txt"
    test_file.write_text("Second content")
    temp_git_repo.index.add(["test.txt"])
    temp_git_repo.index.commit("Second commit")

    temp_git_repo.head.reference = temp_git_repo.head.commit
    return temp_git_repo


@pytest.fixture
def remote_repo(tmp_path):
    """Create a bare repository to push to."""
    return Repo.init(tmp_path / "remote.git", bare=True)
