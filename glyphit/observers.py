"""Observer pattern for git operations."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape


class GitOperationObserver(ABC):
    """Abstract base class for git operation observers."""

    @abstractmethod
    def on_files_staged(self, paths: List[str]) -> None:
        """Called when files were added to the index."""
        pass

    @abstractmethod
    def on_commit_created(self, commit_sha: str, subject: str) -> None:
        """Called when a commit is created."""
        pass

    @abstractmethod
    def on_push_completed(self, success: bool, refspec: str) -> None:
        """Called when a push operation completes."""
        pass

    @abstractmethod
    def on_operation_failed(self, operation: str, error: Exception) -> None:
        """Called when an operation fails before completing."""
        pass


class ConsoleLogObserver(GitOperationObserver):
    """Observer that logs git operations to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_files_staged(self, paths: List[str]) -> None:
        self.console.print(f"[green]Staged {len(paths)} file(s): {escape(', '.join(paths))}[/green]")

    def on_commit_created(self, commit_sha: str, subject: str) -> None:
        self.console.print(f"[green]Created commit {commit_sha[:7]}: {escape(subject)}[/green]")

    def on_push_completed(self, success: bool, refspec: str) -> None:
        if success:
            self.console.print(f"[green]Successfully pushed {refspec}[/green]")
        else:
            self.console.print(f"[red]Failed to push {refspec}[/red]")

    def on_operation_failed(self, operation: str, error: Exception) -> None:
        self.console.print(f"[dim]{operation} stopped: {type(error).__name__}[/dim]")


class FileLogObserver(GitOperationObserver):
    """Observer that logs git operations to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_files_staged(self, paths: List[str]) -> None:
        self._log(f"Staged: {', '.join(paths)}")

    def on_commit_created(self, commit_sha: str, subject: str) -> None:
        self._log(f"Created commit {commit_sha}: {subject}")

    def on_push_completed(self, success: bool, refspec: str) -> None:
        status = "Successfully" if success else "Failed to"
        self._log(f"{status} push {refspec}")

    def on_operation_failed(self, operation: str, error: Exception) -> None:
        self._log(f"{operation} failed: {type(error).__name__}: {error}")
