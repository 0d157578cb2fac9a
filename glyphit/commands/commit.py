"""Command for creating git commits."""

import configparser
from typing import List, Optional

from git import Actor, Commit, Repo
from rich.console import Console

from ..commit_message import CommitMessageBuilder, InputSource
from ..errors import (
    CommitAborted,
    CommitCreationError,
    CommitError,
    IdentityMissing,
    PromptAborted,
    TreeWriteError,
)
from ..models import AuthorIdentity, CommitMessage
from .base import GitCommand


class CommitCommand(GitCommand):
    """Command for creating a commit from the current index.

    This command handles:
    1. Reading the author identity from git configuration
    2. Obtaining the message from a CommitMessageBuilder
    3. Writing the index as a tree
    4. Creating the commit on top of HEAD (or as a root commit) and
       advancing HEAD to it

    Attributes:
        builder (CommitMessageBuilder): Source of the commit message
        commit_sha (Optional[str]): The hash of the created commit
        message (Optional[CommitMessage]): The message of the created commit
    """

    name = "commit"

    def __init__(
        self,
        repo: Repo,
        builder: Optional[CommitMessageBuilder] = None,
        source: Optional[InputSource] = None,
        console: Optional[Console] = None,
    ):
        """Initialize the commit command.

        Args:
            repo: The git repository to operate on
            builder: Message builder, interactive with the default catalog if omitted
            source: Where interactive answers come from, the terminal if omitted
            console: Optional Rich console for output
        """
        super().__init__(repo, console)
        self.builder = builder or CommitMessageBuilder()
        self.source = source
        self.commit_sha: Optional[str] = None
        self.message: Optional[CommitMessage] = None

    def execute(self) -> str:
        """Create the commit.

        Returns:
            str: The hex sha of the new commit

        Raises:
            IdentityMissing: If user.name or user.email is not configured
            CommitAborted: If the operator cancels the message prompts
            TreeWriteError: If the index cannot be written as a tree
            CommitCreationError: If the commit object cannot be created
        """
        try:
            sha, message = self._commit()
        except CommitError as e:
            self._notify_failure(e)
            raise

        self.commit_sha = sha
        self.message = message
        for observer in self.observers:
            observer.on_commit_created(sha, message.subject)
        return sha

    def _commit(self):
        identity = self.read_identity()

        try:
            message = self.builder.build(self.source)
        except PromptAborted as e:
            raise CommitAborted(f"Commit aborted: {e}") from e

        try:
            tree = self.repo.index.write_tree()
        except Exception as e:
            raise TreeWriteError(f"Cannot write tree from index: {e}") from e

        parents = self.parent_commits()
        actor = Actor(identity.name, identity.email)
        try:
            commit = Commit.create_from_tree(
                self.repo,
                tree,
                message.render(),
                parent_commits=parents,
                head=True,
                author=actor,
                committer=actor,
            )
        except Exception as e:
            raise CommitCreationError(f"Cannot create commit: {e}") from e

        return commit.hexsha, message

    def read_identity(self) -> AuthorIdentity:
        """Read user.name and user.email from every git configuration level."""
        try:
            with self.repo.config_reader() as reader:
                name = reader.get_value("user", "name")
                email = reader.get_value("user", "email")
        except (configparser.Error, OSError) as e:
            raise IdentityMissing(
                "Author identity unknown; set user.name and user.email in git config"
            ) from e
        name, email = str(name).strip(), str(email).strip()
        if not name or not email:
            raise IdentityMissing(
                "Author identity is empty; set user.name and user.email in git config"
            )
        return AuthorIdentity(name=name, email=email)

    def parent_commits(self) -> List[Commit]:
        """HEAD's commit, or nothing when the branch is unborn."""
        if not self.repo.head.is_valid():
            return []
        return [self.repo.head.commit]
