"""Shared fixtures for gohooks tests."""

import os
import shutil
import subprocess

import pytest

from gohooks.console_color import SpecialChar
from gohooks.process import ProcessResult


class FakeRunner:
    """Stands in for run_process, answers from a table and records calls."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def __call__(self, command, *args, cwd=None):
        self.calls.append((command, *args))
        response = self.responses.get((command, *args))
        if isinstance(response, Exception):
            raise response
        if response is None:
            return ProcessResult(command=command, args=list(args))
        return response


@pytest.fixture(autouse=True)
def no_colors(monkeypatch):
    """Keep console output free of escape codes."""
    monkeypatch.setattr(SpecialChar, "END", "")
    monkeypatch.setattr(SpecialChar, "RED", "")
    monkeypatch.setattr(SpecialChar, "GREEN", "")


@pytest.fixture
def make_runner():
    return FakeRunner


def run_git(repo, *args):
    return subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=repo, check=True, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
    ).stdout.decode("utf-8")


@pytest.fixture
def git_repo(tmp_path):
    """An empty git repository with a committer identity."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo = str(tmp_path / "repo")
    os.makedirs(repo)
    run_git(repo, "init", "-q")
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "core.hooksPath", os.path.join(repo, ".git", "hooks"))
    return repo


@pytest.fixture
def git(git_repo):
    """Run git inside the test repository."""
    def _git(*args):
        return run_git(git_repo, *args)
    return _git


@pytest.fixture
def write_file(git_repo):
    def _write_file(path, content=""):
        full_path = os.path.join(git_repo, path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)
        return full_path
    return _write_file
