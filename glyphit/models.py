"""Shared models for glyphit."""
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field

PLACEHOLDER_MESSAGE = "unit testing"
DEFAULT_REMOTE = "origin"


def normalize_path(path: str) -> str:
    """Strip leading ``./`` or ``.\\`` prefixes so the path is root-relative."""
    while path.startswith(("./", ".\\")):
        path = path[2:]
    return path


@dataclass(frozen=True)
class StagingEntry:
    path: str

    @classmethod
    def from_argument(cls, argument: str) -> "StagingEntry":
        return cls(normalize_path(argument))


class CommitMessage(BaseModel):
    glyph: str = ""
    title: str = ""
    body: str = ""
    breaking_changes: str = ""
    verbatim: Optional[str] = Field(
        default=None, description="Fixed text used instead of the assembled segments"
    )

    @classmethod
    def placeholder(cls) -> "CommitMessage":
        return cls(verbatim=PLACEHOLDER_MESSAGE)

    def render(self) -> str:
        if self.verbatim is not None:
            return self.verbatim
        return (
            f"{self.glyph}{self.title}\n"
            f"{self.body}\n"
            f"BREAKING CHANGES: {self.breaking_changes}\n"
        )

    @property
    def subject(self) -> str:
        return self.render().split("\n", 1)[0]


class AuthorIdentity(BaseModel):
    name: str
    email: str


@dataclass(frozen=True)
class RemoteTarget:
    branch: str
    remote_name: str = DEFAULT_REMOTE

    @property
    def refspec(self) -> str:
        return f"refs/heads/{self.branch}:refs/heads/{self.branch}"


@dataclass
class PushResult:
    target: RemoteTarget
    url: str
    summaries: List[str]
