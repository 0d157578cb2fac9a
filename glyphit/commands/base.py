"""Base command class for git operations.

This module provides the abstract base class for all git commands,
implementing the Command Pattern with observer support.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from git import Repo
from rich.console import Console

from ..observers import GitOperationObserver


class GitCommand(ABC):
    """Abstract base class for git commands.

    Concrete commands implement execute(), which either returns the
    command's result or raises a typed ``GlyphitError``. Observers hear
    about both outcomes.

    Attributes:
        repo (Repo): The git repository to operate on
        console (Console): Rich console for output
        observers (List[GitOperationObserver]): List of observers to notify
    """

    name = "git"

    def __init__(self, repo: Repo, console: Optional[Console] = None):
        """Initialize the command.

        Args:
            repo: The git repository to operate on
            console: Optional Rich console for output
        """
        self.repo = repo
        self.console = console or Console()
        self.observers: List[GitOperationObserver] = []

    def add_observer(self, observer: GitOperationObserver) -> None:
        """Add an observer to be notified of command execution."""
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def _notify_failure(self, error: Exception) -> None:
        for observer in self.observers:
            observer.on_operation_failed(self.name, error)

    @abstractmethod
    def execute(self) -> Any:
        """Execute the git command.

        Returns:
            The command's result

        Raises:
            GlyphitError: If the command fails
        """
        pass
