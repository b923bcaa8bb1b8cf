import pytest
import tempfile
from pathlib import Path
from git import Repo

from aicommit.config import CONFIG_PATH_ENV, ENV_MAPPING

pytest_plugins = ('pytest_asyncio',)


def _configure_identity(repo: Repo) -> None:
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp location and clear env overrides."""
    for env_var in ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)
    config_path = tmp_path / "home" / ".ai-commit.json"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_path))
    return config_path


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with one commit."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)
        _configure_identity(repo)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")

        yield tmp_dir


@pytest.fixture
def staged_git_repo(temp_git_repo):
    """Temporary repository with one modified file staged."""
    repo = Repo(temp_git_repo)
    test_file = Path(temp_git_repo) / "test.txt"
    test_file.write_text("Initial content\nadded line\n")
    repo.index.add(["test.txt"])
    return temp_git_repo


@pytest.fixture
def empty_git_repo():
    """Temporary repository without any commits."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)
        _configure_identity(repo)
        yield tmp_dir
