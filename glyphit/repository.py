"""Repository discovery."""
import os
from typing import Optional, Union

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from .errors import RepositoryNotFound


def resolve_repository(
    explicit: Optional[Repo] = None, path: Optional[Union[str, os.PathLike]] = None
) -> Repo:
    """Return the repository to operate on.

    An explicit handle is returned unchanged. Otherwise the enclosing
    repository is discovered by walking upward from ``path`` (the current
    working directory by default).

    Raises:
        RepositoryNotFound: If no repository encloses the starting directory.
    """
    if explicit is not None:
        return explicit

    start = os.fspath(path) if path is not None else os.getcwd()
    try:
        return Repo(start, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryNotFound(f"No git repository found from {start}") from e
