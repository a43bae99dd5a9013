"""Tests for URL resolver."""

import pytest

from repo_mirror.git.url_resolver import URLResolver


@pytest.mark.unit
class TestNormalize:
    """Tests for URLResolver.normalize."""

    def test_appends_suffix_to_https(self) -> None:
        assert URLResolver.normalize("https://github.com/org/repo") == "https://github.com/org/repo.git"

    def test_appends_suffix_to_ssh(self) -> None:
        assert URLResolver.normalize("git@github.com:org/repo") == "git@github.com:org/repo.git"

    def test_ssh_with_suffix_unchanged(self) -> None:
        url = "git@github.com:org/repo.git"
        assert URLResolver.normalize(url) == url

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/org/repo",
            "git@github.com:org/repo",
            "https://gitlab.com/group/project",
        ],
    )
    def test_idempotent(self, url: str) -> None:
        once = URLResolver.normalize(url)
        assert URLResolver.normalize(once) == once
        assert once.endswith(".git")
        assert not once.endswith(".git.git")


@pytest.mark.unit
class TestIsValid:
    """Tests for URLResolver.is_valid."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/org/repo.git",
            "https://github.com/org/repo",
            "git@github.com:org/repo.git",
            "deploy@github.com:org/repo.git",
        ],
    )
    def test_accepts(self, resolver: URLResolver, url: str) -> None:
        assert resolver.is_valid(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "https://gitlab.com/org/repo.git",
            "git@github.com:org/repo",
            "https://github.com/repo.git",
            "https://github.com/org/",
            "https://github.com//repo.git",
            "https://github.com/org/.git",
            "git@github.com:/repo.git",
            "git@github.com:org/.git",
            "https://github.com/org/sub/repo.git",
            "http://github.com/org/repo.git",
            "https://github.com/org/my repo.git",
            "",
        ],
    )
    def test_rejects(self, resolver: URLResolver, url: str) -> None:
        assert resolver.is_valid(url) is False

    def test_custom_host(self) -> None:
        resolver = URLResolver("git.example.org")
        assert resolver.is_valid("https://git.example.org/team/tool.git")
        assert not resolver.is_valid("https://github.com/team/tool.git")


@pytest.mark.unit
class TestMatchesHost:
    """Tests for URLResolver.matches_host."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/org/repo.git",
            "git@github.com:org/repo.git",
            "ssh://git@github.com/org/repo.git",
            "ssh://git@github.com:22/org/repo.git",
            "https://token@GitHub.com/org/repo.git",
        ],
    )
    def test_matches(self, resolver: URLResolver, url: str) -> None:
        assert resolver.matches_host(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "https://gitlab.com/org/repo.git",
            "git@bitbucket.org:org/repo.git",
            "https://github.com.example.net/org/repo.git",
            "https://notgithub.com/org/repo.git",
            "https://gitlab.com/github.com/tools.git",
            "https://gitlab.com/org/github.com",
            "git@gitlab.com:github.com/repo.git",
        ],
    )
    def test_rejects(self, resolver: URLResolver, url: str) -> None:
        assert resolver.matches_host(url) is False

