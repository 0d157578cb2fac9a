"""Command for pushing the current branch to origin."""

import configparser
from typing import Optional

from git import GitCommandError, PushInfo, Repo
from git.config import GitConfigParser
from rich.console import Console

from ..credentials import CredentialResolver, username_from_url
from ..errors import (
    DetachedOrUnbornHead,
    NoRemoteConfigured,
    PushError,
    PushRejected,
    RemoteNotFound,
)
from ..models import DEFAULT_REMOTE, PushResult, RemoteTarget
from .base import GitCommand


class PushCommand(GitCommand):
    """Command for pushing the current branch to the "origin" remote.

    A single push attempt is made. Whatever git reports on failure is
    carried in the raised PushRejected.
    """

    name = "push"

    def __init__(
        self,
        repo: Repo,
        resolver: Optional[CredentialResolver] = None,
        console: Optional[Console] = None,
    ):
        super().__init__(repo, console)
        self.resolver = resolver or CredentialResolver()
        self.target: Optional[RemoteTarget] = None
        self.result: Optional[PushResult] = None

    def execute(self) -> PushResult:
        """Push HEAD's branch to the same-named branch on origin.

        Raises:
            DetachedOrUnbornHead: If HEAD is not on a branch with commits
            NoRemoteConfigured: If remote.origin.url is not set
            RemoteNotFound: If no remote named origin exists
            PushRejected: If git fails or rejects the push
        """
        try:
            self.result = self._push()
        except PushRejected as e:
            for observer in self.observers:
                observer.on_push_completed(False, self.target.refspec)
            self._notify_failure(e)
            raise
        except PushError as e:
            self._notify_failure(e)
            raise

        for observer in self.observers:
            observer.on_push_completed(True, self.result.target.refspec)
        return self.result

    def _push(self) -> PushResult:
        target = self.target = self.remote_target()

        with self.repo.config_reader() as reader:
            url = self.remote_url(reader, target.remote_name)
            strategy = self.resolver.resolve(url, reader)

        remote = self.find_remote(target.remote_name)
        env = strategy.credentials(url, username_from_url(url))

        try:
            with self.repo.git.custom_environment(**env):
                infos = remote.push(target.refspec)
            infos.raise_if_error()
        except GitCommandError as e:
            raise PushRejected(f"Push to {url} failed: {e}") from e

        failed = [info for info in infos if info.flags & PushInfo.ERROR]
        if failed:
            summary = "; ".join(info.summary.strip() for info in failed)
            raise PushRejected(f"Push to {url} rejected: {summary}")

        return PushResult(
            target=target, url=url, summaries=[info.summary.strip() for info in infos]
        )

    def remote_target(self) -> RemoteTarget:
        """The same-name branch mapping for HEAD."""
        head = self.repo.head
        if head.is_detached:
            raise DetachedOrUnbornHead("HEAD is detached; check out a branch to push")
        if not head.is_valid():
            raise DetachedOrUnbornHead(
                f"Branch '{head.ref.name}' has no commits yet"
            )
        return RemoteTarget(branch=self.repo.active_branch.name, remote_name=DEFAULT_REMOTE)

    @staticmethod
    def remote_url(reader: GitConfigParser, remote_name: str = DEFAULT_REMOTE) -> str:
        try:
            return str(reader.get_value(f'remote "{remote_name}"', "url"))
        except (configparser.NoSectionError, configparser.NoOptionError) as e:
            raise NoRemoteConfigured(f"remote.{remote_name}.url is not configured") from e

    def find_remote(self, remote_name: str = DEFAULT_REMOTE):
        try:
            return self.repo.remote(remote_name)
        except ValueError as e:
            raise RemoteNotFound(f"Remote '{remote_name}' does not exist") from e
