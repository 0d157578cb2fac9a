"""Command for adding files to the index."""

import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from git import GitCommandError, GitError, Repo
from rich.console import Console

from ..errors import AddFailure, IndexAccessError, IndexWriteError, StagingError
from ..models import StagingEntry
from .base import GitCommand

_GLOB_CHARS = re.compile(r"[*?[]")


class AddCommand(GitCommand):
    """Command for staging files.

    Every path is validated and expanded before the index is modified, so
    a bad path stages nothing. Tracked files missing from the working tree
    have their entries removed, as `git add` does. Writing the index back
    to disk is a separate step and is not rolled back if it fails.

    Attributes:
        entries (List[StagingEntry]): Normalized paths to stage
        staged_paths (List[str]): Paths added or removed by the last execute()
    """

    name = "add"

    def __init__(self, repo: Repo, paths: Iterable[str], console: Optional[Console] = None):
        super().__init__(repo, console)
        self.entries = [StagingEntry.from_argument(p) for p in paths]
        self.staged_paths: List[str] = []

    def execute(self) -> List[str]:
        """Stage the requested paths and write the index.

        Returns:
            List[str]: Root-relative paths added to or removed from the index

        Raises:
            IndexAccessError: If the index cannot be opened
            AddFailure: If any path cannot be staged
            IndexWriteError: If the index cannot be written back
        """
        try:
            staged = self._stage()
        except StagingError as e:
            self._notify_failure(e)
            raise

        self.staged_paths = staged
        for observer in self.observers:
            observer.on_files_staged(staged)
        return staged

    def _stage(self) -> List[str]:
        if not self.entries:
            raise AddFailure("No paths given")

        work_tree = self.repo.working_tree_dir
        if work_tree is None:
            raise IndexAccessError("Bare repository has no working tree to stage from")

        try:
            index = self.repo.index
            index.entries  # read the index file now so access errors surface here
        except Exception as e:
            raise IndexAccessError(f"Cannot open index: {e}") from e

        paths: List[str] = []
        deleted: List[str] = []
        for entry in self.entries:
            present, missing = self._expand(entry.path, Path(work_tree))
            paths.extend(present)
            deleted.extend(missing)
        paths = list(dict.fromkeys(paths))
        deleted = list(dict.fromkeys(deleted))

        # git rm writes the index file itself, so it runs before the in-memory add
        if deleted:
            try:
                index.remove(deleted, working_tree=False)
            except (OSError, GitError) as e:
                raise AddFailure(f"Cannot stage removal of {', '.join(deleted)}: {e}") from e

        if paths:
            try:
                index.add(paths, write=False)
            except (OSError, ValueError, GitError) as e:
                raise AddFailure(f"Cannot stage {', '.join(paths)}: {e}") from e

        try:
            index.write()
        except (OSError, GitError) as e:
            raise IndexWriteError(f"Cannot write index: {e}") from e

        return paths + deleted

    def _ls_files(self, pathspec: str, *options: str) -> List[str]:
        try:
            output = self.repo.git.ls_files("-z", *options, "--", pathspec)
        except GitCommandError as e:
            raise AddFailure(f"Invalid pathspec '{pathspec}': {e}") from e
        return list(dict.fromkeys(p for p in output.split("\0") if p))

    def _expand(self, path: str, work_tree: Path) -> Tuple[List[str], List[str]]:
        """Turn one path argument into files to add and tracked files to remove."""
        pathspec = path or "."
        if _GLOB_CHARS.search(pathspec) or (work_tree / pathspec).is_dir():
            listed = self._ls_files(pathspec, "--cached", "--others", "--exclude-standard")
            if not listed:
                raise AddFailure(f"pathspec '{pathspec}' did not match any files")
            present = [p for p in listed if os.path.lexists(work_tree / p)]
            missing = [p for p in listed if p not in present]
            return present, missing

        if not os.path.lexists(work_tree / pathspec):
            tracked = self._ls_files(pathspec, "--cached")
            if not tracked:
                raise AddFailure(f"'{pathspec}' does not exist")
            return [], tracked
        try:
            ignored = self.repo.ignored(pathspec)
        except GitCommandError as e:
            raise AddFailure(f"Cannot stage '{pathspec}': {e}") from e
        if ignored:
            raise AddFailure(f"'{pathspec}' is ignored by one of your .gitignore files")
        return [pathspec], []
