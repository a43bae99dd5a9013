"""Git helpers shared by tests."""

import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def run_git(*args: str, cwd: Path) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout.strip()


def make_repo(path: Path, remote: str | None = None, branch: str = "main") -> Path:
    """Create a local git repository, optionally with an ``origin`` remote."""
    path.mkdir(parents=True, exist_ok=True)
    run_git("init", cwd=path)
    run_git("symbolic-ref", "HEAD", f"refs/heads/{branch}", cwd=path)
    if remote:
        run_git("remote", "add", "origin", remote, cwd=path)
    return path


def commit_file(repo: Path, name: str = "README.md", content: str = "# Test\n") -> None:
    run_git("config", "user.email", "test@test.com", cwd=repo)
    run_git("config", "user.name", "Test", cwd=repo)
    (repo / name).write_text(content)
    run_git("add", ".", cwd=repo)
    run_git("commit", "-m", f"Add {name}", cwd=repo)
