"""Sources of operator answers for the commit message conversation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from rich.console import Console
from rich.prompt import IntPrompt, Prompt
from rich.table import Table
from rich.text import Text

from ..errors import PromptAborted, SelectionAborted


@dataclass(frozen=True)
class MenuPrompt:
    """Suspension point waiting for one label out of ``options``."""

    message: str
    options: Sequence[str]


@dataclass(frozen=True)
class TextPrompt:
    """Suspension point waiting for one line of free text."""

    message: str


PromptStep = Union[MenuPrompt, TextPrompt]


class InputSource(ABC):
    """Abstract base class for answering prompt steps."""

    def answer(self, step: PromptStep) -> str:
        if isinstance(step, MenuPrompt):
            return self.select(step.message, step.options)
        return self.ask(step.message)

    @abstractmethod
    def select(self, message: str, options: Sequence[str]) -> str:
        """Return the chosen option label.

        Raises:
            SelectionAborted: If the operator cancels the menu
        """
        pass

    @abstractmethod
    def ask(self, message: str) -> str:
        """Return one line of operator input."""
        pass


class ConsoleInputSource(InputSource):
    """Reads answers from the terminal using rich prompts."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def select(self, message: str, options: Sequence[str]) -> str:
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column(justify="right", style="dim")
        table.add_column()
        for number, label in enumerate(options, start=1):
            table.add_row(str(number), Text(label))

        self.console.print(f"[bold]{message}[/bold]")
        self.console.print(table)
        try:
            choice = IntPrompt.ask(
                "Choice",
                console=self.console,
                choices=[str(n) for n in range(1, len(options) + 1)],
                show_choices=False,
            )
        except (KeyboardInterrupt, EOFError) as e:
            raise SelectionAborted("Emoji selection cancelled") from e
        return options[choice - 1]

    def ask(self, message: str) -> str:
        try:
            return Prompt.ask(message.rstrip(" >"), console=self.console, default="", show_default=False)
        except EOFError:
            return ""
        except KeyboardInterrupt as e:
            raise PromptAborted("Commit message prompt cancelled") from e


class ScriptedInputSource(InputSource):
    """Answers prompts from a fixed list, in order.

    Menu answers may be given as the label itself or as a 1-based index.
    Running out of answers is treated as the operator cancelling.
    """

    def __init__(self, answers: Iterable[Union[str, int]]):
        self.answers: List[Union[str, int]] = list(answers)
        self.asked: List[str] = []

    def _next(self, message: str):
        self.asked.append(message)
        if not self.answers:
            return None
        return self.answers.pop(0)

    def select(self, message: str, options: Sequence[str]) -> str:
        answer = self._next(message)
        if answer is None:
            raise SelectionAborted("No scripted answer for the emoji menu")
        if isinstance(answer, int):
            if not 1 <= answer <= len(options):
                raise SelectionAborted(f"Scripted choice {answer} is out of range")
            return options[answer - 1]
        if answer not in options:
            raise SelectionAborted(f"Scripted choice {answer!r} is not a menu option")
        return answer

    def ask(self, message: str) -> str:
        answer = self._next(message)
        if answer is None:
            raise PromptAborted(f"No scripted answer for {message!r}")
        return str(answer)
