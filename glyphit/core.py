"""Core add/commit/push orchestration for glyphit."""
from typing import Iterable, List, Optional

from git import Repo
from rich.console import Console

from .catalog import EmojiCatalog
from .commands import AddCommand, CommitCommand, GitCommand, PushCommand
from .commit_message import CommitMessageBuilder, ConsoleInputSource, InputSource
from .credentials import CredentialResolver
from .models import PushResult
from .observers import GitOperationObserver
from .repository import resolve_repository


class GitWorkflow:
    """Runs glyphit commands against one resolved repository.

    The repository is resolved once by the caller and threaded into every
    command, so a composed add/commit/push always targets the same
    repository. Nothing here locks the repository; callers must not run
    two workflows against it at the same time.
    """

    def __init__(
        self,
        repo: Repo,
        console: Optional[Console] = None,
        catalog: Optional[EmojiCatalog] = None,
        resolver: Optional[CredentialResolver] = None,
    ):
        self.repo = repo
        self.console = console or Console()
        self.catalog = catalog or EmojiCatalog()
        self.resolver = resolver or CredentialResolver()
        self.observers: List[GitOperationObserver] = []
        self.command_history: List[GitCommand] = []

    def add_observer(self, observer: GitOperationObserver) -> None:
        """Add an observer to be notified of git operations."""
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def execute_command(self, command: GitCommand):
        """Execute a command and record it in history if it succeeds."""
        for observer in self.observers:
            command.add_observer(observer)

        result = command.execute()
        self.command_history.append(command)
        return result

    def add(self, paths: Iterable[str]) -> List[str]:
        return self.execute_command(AddCommand(self.repo, paths, self.console))

    def commit(self, interactive: bool = True, source: Optional[InputSource] = None) -> str:
        builder = CommitMessageBuilder(self.catalog, interactive=interactive)
        if interactive and source is None:
            source = ConsoleInputSource(self.console)
        return self.execute_command(CommitCommand(self.repo, builder, source, self.console))

    def push(self) -> PushResult:
        return self.execute_command(PushCommand(self.repo, self.resolver, self.console))


def add(paths: Iterable[str], repo: Optional[Repo] = None) -> List[str]:
    """Stage ``paths`` in ``repo``, or in the repository enclosing the cwd."""
    return GitWorkflow(resolve_repository(repo)).add(paths)


def commit(
    repo: Optional[Repo] = None,
    interactive: bool = True,
    source: Optional[InputSource] = None,
) -> str:
    """Commit the index and return the new commit's hex sha."""
    return GitWorkflow(resolve_repository(repo)).commit(interactive, source)


def push(repo: Optional[Repo] = None) -> PushResult:
    """Push the current branch to origin."""
    return GitWorkflow(resolve_repository(repo)).push()
