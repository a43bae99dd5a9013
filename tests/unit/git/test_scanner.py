"""Tests for repository discovery."""

from pathlib import Path

import pytest

from helpers import make_repo, requires_git
from repo_mirror.git.client import GitClient
from repo_mirror.git.scanner import (
    RepositoryScanner,
    exclude_nested,
    find_repository_roots,
    to_display_path,
)


def _fake_repo(path: Path) -> Path:
    (path / ".git").mkdir(parents=True)
    return path


@pytest.mark.unit
class TestDiscovery:
    """Tests for the filesystem walk and nested exclusion."""

    def test_find_roots(self, tmp_path: Path) -> None:
        a = _fake_repo(tmp_path / "a")
        b = _fake_repo(tmp_path / "group" / "b")
        (tmp_path / "plain").mkdir()

        assert find_repository_roots(tmp_path) == [a, b]

    def test_git_file_is_not_a_root(self, tmp_path: Path) -> None:
        worktree = tmp_path / "worktree"
        worktree.mkdir()
        (worktree / ".git").write_text("gitdir: /elsewhere\n")
        assert find_repository_roots(tmp_path) == []

    def test_does_not_descend_into_git_dir(self, tmp_path: Path) -> None:
        a = _fake_repo(tmp_path / "a")
        (a / ".git" / "modules" / "x" / ".git").mkdir(parents=True)
        assert find_repository_roots(tmp_path) == [a]

    def test_nested_repository_excluded(self, tmp_path: Path) -> None:
        base = tmp_path / "base"
        a = _fake_repo(base / "a")
        _fake_repo(base / "a" / "vendor" / "b")

        roots = find_repository_roots(base)
        assert len(roots) == 2
        assert exclude_nested(roots, base) == [a]

    def test_base_itself_is_a_repository(self, tmp_path: Path) -> None:
        base = _fake_repo(tmp_path / "base")
        _fake_repo(base / "sub")
        assert exclude_nested(find_repository_roots(base), base) == [base]

    def test_ancestors_above_base_ignored(self, tmp_path: Path) -> None:
        outer = _fake_repo(tmp_path / "outer")
        base = outer / "checkouts"
        inner = _fake_repo(base / "inner")
        assert exclude_nested(find_repository_roots(base), base) == [inner]

    def test_siblings_kept(self, tmp_path: Path) -> None:
        a = _fake_repo(tmp_path / "a")
        b = _fake_repo(tmp_path / "b")
        assert exclude_nested(find_repository_roots(tmp_path), tmp_path) == [a, b]


@pytest.mark.unit
class TestDisplayPath:
    """Tests for home directory substitution."""

    def test_under_home(self, tmp_path: Path) -> None:
        home = tmp_path / "me"
        assert to_display_path(home / "work" / "repo", home) == "~/work/repo"

    def test_home_itself(self, tmp_path: Path) -> None:
        assert to_display_path(tmp_path, tmp_path) == "~"

    def test_outside_home(self, tmp_path: Path) -> None:
        home = tmp_path / "me"
        other = tmp_path.resolve() / "men" / "repo"
        assert to_display_path(other, home) == str(other)

    def test_symlinked_home(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real)
        assert to_display_path(real.resolve() / "work" / "repo", link) == "~/work/repo"
        assert to_display_path(link / "work", real) == "~/work"


@requires_git
@pytest.mark.unit
class TestRepositoryScanner:
    """Tests for RepositoryScanner with real repositories."""

    def test_iter_repositories(self, tmp_path: Path) -> None:
        home = tmp_path
        base = tmp_path / "code"
        make_repo(base / "app", remote="https://github.com/org/app.git", branch="develop")
        make_repo(base / "app" / "vendor" / "lib", remote="https://github.com/org/lib.git")
        make_repo(base / "local")

        scanner = RepositoryScanner(GitClient(), home=home)
        repos = list(scanner.iter_repositories(base))

        assert [repo.path for repo in repos] == [base / "app", base / "local"]
        app, local = repos
        assert app.remote_url == "https://github.com/org/app.git"
        assert app.branch == "develop"
        assert app.display_path == "~/code/app"
        assert local.remote_url is None
        assert local.branch == "main"

    def test_inspect_remote_failure_becomes_no_remote(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from repo_mirror.core.exceptions import GitCommandError

        repo = make_repo(tmp_path / "repo", remote="https://github.com/org/repo.git")

        def broken(self, path, primary="origin"):
            raise GitCommandError("remote listing failed")

        monkeypatch.setattr(GitClient, "get_remote_url", broken)
        discovered = RepositoryScanner(GitClient()).inspect(repo)
        assert discovered.remote_url is None
