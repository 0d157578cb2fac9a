"""Credential strategies for pushing to a remote.

GitPython transports pushes through the ``git`` executable, so a strategy
answers a credential request with the environment the ``git push`` process
runs under.
"""
import re
import shlex
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from urllib.parse import urlsplit

DEFAULT_SSH_USERNAME = "git"

_SCP_LIKE = re.compile(r"^(?P<user>[^@/:]+)@[^/:]+:")


def username_from_url(url: str) -> Optional[str]:
    """Extract the username embedded in a remote URL, if any."""
    match = _SCP_LIKE.match(url)
    if match:
        return match.group("user")
    try:
        return urlsplit(url).username
    except ValueError:
        return None


def uses_https(url: str) -> bool:
    """Tell whether a remote URL should authenticate through credential helpers.

    URLs with a parseable scheme are classified by that scheme, and scp-like
    ``user@host:path`` addresses always go over SSH. Anything else (local
    paths or malformed input) falls back to looking for ``https`` anywhere in
    the text.
    """
    if _SCP_LIKE.match(url.strip()):
        return False
    try:
        scheme = urlsplit(url.strip()).scheme.lower()
    except ValueError:
        scheme = ""
    # single letters are Windows drive prefixes, not schemes
    if len(scheme) > 1:
        return scheme == "https"
    return "https" in url


class CredentialStrategy(ABC):
    """Abstract base class for push authentication strategies."""

    kind: str = ""

    @abstractmethod
    def credentials(self, url: str, username_hint: Optional[str] = None) -> Dict[str, str]:
        """Return environment overrides for a push to ``url``."""
        pass


class SshAgentStrategy(CredentialStrategy):
    """Authenticate with a key held by the operator's running SSH agent."""

    kind = "ssh-agent"

    def credentials(self, url: str, username_hint: Optional[str] = None) -> Dict[str, str]:
        username = username_hint or DEFAULT_SSH_USERNAME
        return {
            "GIT_SSH_COMMAND": f"ssh -o BatchMode=yes -l {shlex.quote(username)}",
        }


class CredentialHelperStrategy(CredentialStrategy):
    """Defer to the credential helpers configured for the repository."""

    kind = "credential-helper"

    def __init__(self, helpers: Optional[List[str]] = None):
        self.helpers = list(helpers or [])

    def credentials(self, url: str, username_hint: Optional[str] = None) -> Dict[str, str]:
        # Without a terminal prompt git can only ask the configured helpers.
        return {"GIT_TERMINAL_PROMPT": "0"}


class CredentialResolver:
    """Selects the credential strategy for a remote URL."""

    def resolve(self, remote_url: str, repo_config=None) -> CredentialStrategy:
        """Pick SSH-agent or credential-helper authentication for ``remote_url``.

        Args:
            remote_url: The URL of the push target
            repo_config: A GitPython config reader the helpers are bound to
        """
        if not uses_https(remote_url):
            return SshAgentStrategy()
        return CredentialHelperStrategy(self._configured_helpers(repo_config))

    @staticmethod
    def _configured_helpers(repo_config) -> List[str]:
        if repo_config is None or not repo_config.has_option("credential", "helper"):
            return []
        return [str(value) for value in repo_config.get_values("credential", "helper")]
