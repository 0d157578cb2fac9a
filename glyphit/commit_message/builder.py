"""Interactive assembly of emoji-tagged commit messages."""
from typing import Generator, Optional

from ..catalog import EmojiCatalog, glyph_of
from ..models import CommitMessage
from .input import ConsoleInputSource, InputSource, MenuPrompt, PromptStep, TextPrompt

SELECT_PROMPT = "Select an emoji for your commit:"
TITLE_PROMPT = "Provide a commit title > "
BODY_PROMPT = "Provide a commit message > "
BREAKING_PROMPT = "Provide a breaking changes description > "

Conversation = Generator[PromptStep, str, CommitMessage]


class CommitMessageBuilder:
    """Builds a commit message from a menu choice and three free-text answers.

    The flow is a generator: each ``yield`` is a prompt step waiting for an
    answer, and the generator's return value is the assembled message. Any
    ``InputSource`` can drive it, so tests script the answers instead of
    blocking on a terminal.
    """

    def __init__(self, catalog: Optional[EmojiCatalog] = None, interactive: bool = True):
        self.catalog = catalog or EmojiCatalog()
        self.interactive = interactive

    def conversation(self) -> Conversation:
        label = yield MenuPrompt(SELECT_PROMPT, tuple(self.catalog))
        glyph = glyph_of(label)
        title = yield TextPrompt(TITLE_PROMPT)
        body = yield TextPrompt(BODY_PROMPT)
        breaking_changes = yield TextPrompt(BREAKING_PROMPT)
        return CommitMessage(
            glyph=glyph,
            title=title.strip(),
            body=body.strip(),
            breaking_changes=breaking_changes.strip(),
        )

    def build(self, source: Optional[InputSource] = None) -> CommitMessage:
        """Run the conversation against ``source``.

        In non-interactive mode no prompt is shown and the placeholder
        message is returned.

        Raises:
            SelectionAborted: If the operator cancels the emoji menu
            PromptAborted: If the operator cancels a text prompt
        """
        if not self.interactive:
            return CommitMessage.placeholder()
        if source is None:
            source = ConsoleInputSource()

        steps = self.conversation()
        step = next(steps)
        while True:
            answer = source.answer(step)
            try:
                step = steps.send(answer)
            except StopIteration as done:
                return done.value
