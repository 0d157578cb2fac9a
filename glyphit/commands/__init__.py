"""Git operation commands using the Command Pattern.

Each command wraps one git operation, raises a typed ``GlyphitError`` on
failure and reports to observers.

Example:
    ```python
    from glyphit.commands import AddCommand, CommitCommand
    from glyphit.observers import FileLogObserver

    add_cmd = AddCommand(repo, ["README.md"])
    add_cmd.add_observer(FileLogObserver("git.log"))
    add_cmd.execute()

    sha = CommitCommand(repo).execute()
    ```
"""

from .add import AddCommand
from .base import GitCommand
from .commit import CommitCommand
from .push import PushCommand

__all__ = [
    "AddCommand",
    "CommitCommand",
    "GitCommand",
    "PushCommand",
]
