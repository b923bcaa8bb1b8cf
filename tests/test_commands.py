"""Tests for git commands and observers."""
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
from git import Repo
from rich.console import Console

from aicommit.commands import CommitCommand, GitCommand
from aicommit.observers import ConsoleLogObserver, FileLogObserver, GitOperationObserver


@pytest.fixture
def mock_console():
    """Mock console for testing."""
    console = Mock(spec=Console)
    console.print = Mock()
    return console


@pytest.fixture
def mock_observer():
    observer = Mock(spec=GitOperationObserver)
    observer.on_commit_created = AsyncMock()
    observer.on_message_generated = AsyncMock()
    return observer


@pytest.mark.asyncio
async def test_commit_command(staged_git_repo, mock_console, mock_observer):
    """Test creating a commit with a multi-line message."""
    repo = Repo(staged_git_repo)
    message = "feat: add second line\n\n- add line to test file"

    command = CommitCommand(repo, message, mock_console)
    command.add_observer(mock_observer)
    success = await command.execute()

    assert success is True
    assert len(list(repo.iter_commits())) == 2
    assert repo.head.commit.message.strip() == message
    assert command.commit_hash == repo.head.commit.hexsha
    mock_observer.on_commit_created.assert_awaited_once_with(message)


@pytest.mark.asyncio
async def test_commit_command_no_verify(staged_git_repo, mock_console):
    """A failing pre-commit hook is skipped with no_verify."""
    repo = Repo(staged_git_repo)
    hook = Path(staged_git_repo) / ".git" / "hooks" / "pre-commit"
    hook.parent.mkdir(parents=True, exist_ok=True)
    hook.write_text("#!/bin/sh\nexit 1\n")
    hook.chmod(0o755)

    blocked = CommitCommand(repo, "fix: blocked", mock_console)
    assert await blocked.execute() is False
    assert blocked.error

    skipped = CommitCommand(repo, "fix: not blocked", mock_console, no_verify=True)
    assert await skipped.execute() is True
    assert repo.head.commit.message.strip() == "fix: not blocked"


@pytest.mark.asyncio
async def test_commit_command_nothing_staged(temp_git_repo, mock_console, mock_observer):
    repo = Repo(temp_git_repo)
    command = CommitCommand(repo, "feat: nothing", mock_console)
    command.add_observer(mock_observer)

    assert await command.execute() is False
    assert command.error == "No staged changes to commit"
    assert len(list(repo.iter_commits())) == 1
    mock_observer.on_commit_created.assert_not_awaited()


@pytest.mark.asyncio
async def test_commit_command_first_commit(empty_git_repo, mock_console):
    repo = Repo(empty_git_repo)
    (Path(empty_git_repo) / "README.md").write_text("# demo\n")
    repo.index.add(["README.md"])

    command = CommitCommand(repo, "docs: add readme", mock_console)

    assert await command.execute() is True
    assert repo.head.commit.message.strip() == "docs: add readme"


def test_observer_management(mock_console, mock_observer):
    command = CommitCommand(Mock(spec=Repo), "feat: x", mock_console)
    command.add_observer(mock_observer)
    assert command.observers == [mock_observer]
    command.remove_observer(mock_observer)
    assert command.observers == []


def test_git_command_is_abstract():
    with pytest.raises(TypeError):
        GitCommand(Mock(spec=Repo))


@pytest.mark.asyncio
async def test_file_log_observer(tmp_path):
    log_file = tmp_path / "logs" / "ai-commit.log"
    observer = FileLogObserver(log_file)

    await observer.on_message_generated("feat: add parser\n\n- details")
    await observer.on_commit_created("feat: add parser\n\n- details")

    lines = log_file.read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(" - Generated message: feat: add parser")
    assert lines[1].endswith(" - Created commit: feat: add parser")


@pytest.mark.asyncio
async def test_console_log_observer(mock_console):
    observer = ConsoleLogObserver(mock_console)

    await observer.on_commit_created("fix: handle nulls\n\nbody")

    mock_console.print.assert_called_once_with("[green]Created commit: fix: handle nulls[/green]")
