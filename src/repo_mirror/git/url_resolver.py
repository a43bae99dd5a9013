"""Remote URL normalization and validation."""

import re

GIT_SUFFIX = ".git"


class URLResolver:
    """Normalizes and validates hosting-provider remote URLs.

    Accepted shapes:
    - https://github.com/org/repo.git
    - https://github.com/org/repo
    - git@github.com:org/repo.git
    """

    def __init__(self, host: str = "github.com") -> None:
        self._host = host
        escaped = re.escape(host)
        self._https = re.compile(rf"^https://{escaped}/(?P<org>[^/\s]+)/(?P<repo>[^/\s]+)$")
        self._ssh = re.compile(
            rf"^(?P<user>[^@/:\s]+)@{escaped}:(?P<org>[^/\s]+)/(?P<repo>[^/\s]+\.git)$"
        )
        # scheme, userinfo and subdomains are optional; the host must end the authority
        self._host_pattern = re.compile(
            rf"^(?:[a-z][a-z0-9+.-]*://)?(?:[^@/\s]+@)?(?:[^/:@\s]+\.)?{escaped}(?::\d+)?(?:[:/]|$)",
            re.IGNORECASE,
        )

    @property
    def host(self) -> str:
        return self._host

    @staticmethod
    def normalize(url: str) -> str:
        """Append ``.git`` when missing, whatever the scheme."""
        if url.endswith(GIT_SUFFIX):
            return url
        return url + GIT_SUFFIX

    def is_valid(self, url: str) -> bool:
        """Check a URL against the accepted shapes."""
        match = self._https.match(url) or self._ssh.match(url)
        if match is None:
            return False
        # "org/.git" has no repository name
        return bool(match.group("repo").removesuffix(GIT_SUFFIX))

    def matches_host(self, url: str) -> bool:
        """Whether the URL points at the configured host."""
        return self._host_pattern.match(url) is not None
