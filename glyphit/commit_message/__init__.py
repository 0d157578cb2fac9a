"""Commit message assembly package."""

from .builder import CommitMessageBuilder
from .input import (
    ConsoleInputSource,
    InputSource,
    MenuPrompt,
    ScriptedInputSource,
    TextPrompt,
)

__all__ = [
    'CommitMessageBuilder',
    'ConsoleInputSource',
    'InputSource',
    'MenuPrompt',
    'ScriptedInputSource',
    'TextPrompt',
]
