"""
module askterm.prompt.abstract.baseprompt

Contains the definition of the BasePrompt class, the base class that is extended
by every askterm prompt variant. Variants override _run() to collect input and
reuse the lifecycle, validation, filtering, and terminal line handling here
"""

from collections.abc import Mapping, Sequence
from dataclasses import replace
import logging
from typing import Any, Callable

from ... import constants
from ...choices import normalize_choices
from ...config import AskTermConfig
from ...inputline.abstract import InputLine
from ...terminal.abstract import TerminalBackend
from ...terminal.backends.prompt_toolkit import PromptToolkitTerminal
from ...utils import once
from ..dataclasses import Question
from ..outcomes import settle

logger = logging.getLogger(__name__)


class BasePrompt:
    """
    class BasePrompt

    Base class that is extended by every askterm prompt variant. A prompt
    instance asks exactly one question: it is constructed, run once, and
    discarded after its callback fires
    """

    answered: bool
    config: AskTermConfig
    height: int
    input_line: InputLine
    options: Question
    terminal: TerminalBackend

    def __init__(
        self: "BasePrompt",
        question: Question | Mapping[str, Any],
        input_line: InputLine,
        terminal: TerminalBackend | None = None,
        config: AskTermConfig | None = None,
    ) -> None:
        self.height = 0
        self.answered = False

        # work on a copy so the caller's question is left untouched
        self.options = (
            Question.from_dict(question)
            if isinstance(question, Mapping)
            else replace(question)
        )

        if isinstance(self.options.choices, Sequence) and not isinstance(
            self.options.choices, str
        ):
            self.options.choices = normalize_choices(self.options.choices)

        self.input_line = input_line
        self.terminal = terminal if terminal is not None else PromptToolkitTerminal()
        self.config = config if config is not None else AskTermConfig.make_default()

    def run(self: "BasePrompt", callback: Callable[[Any], Any]) -> "BasePrompt":
        """
        Starts this prompt. Once input collection completes, the collected
        value is filtered and the filtered value is passed to the callback

        Args:
            callback (Callable[[Any], Any]): Called exactly once with the
                filtered answer

        Returns:
            BasePrompt: This prompt

        Raises:
            UserExit: If the user ended input while the prompt was running
        """

        done: Callable[[Any], Any] = once(callback)

        def on_collected(value: Any) -> None:
            logger.debug("Collected %r for %r", value, self.options.message)
            self.filter(value, done)

        self._run(once(on_collected))
        return self

    def _run(self: "BasePrompt", callback: Callable[[Any], Any]) -> None:
        # no input collection on the base prompt. variants override this
        callback(None)

    def clean(self: "BasePrompt", extra_lines: Any = 0) -> "BasePrompt":
        """
        Erases the lines this prompt occupies plus any extra lines (i.e., the
        line left behind by the enter key), then returns the cursor to the
        first column and resets display attributes

        Args:
            extra_lines (Any): The number of lines to erase beyond the height
                of this prompt. Anything that isn't an int counts as zero

        Returns:
            BasePrompt: This prompt

        Raises:
            Nothing
        """

        if not isinstance(extra_lines, int) or isinstance(extra_lines, bool):
            extra_lines = 0

        self.terminal.clean_lines(self.height + extra_lines)
        self.terminal.cursor_left(constants.CLEAN_CURSOR_COLUMNS)
        self.terminal.reset_attributes()
        self.terminal.flush()

        return self

    def error(self: "BasePrompt", message: Any = None) -> "BasePrompt":
        """
        Writes an error line in place of the current line and moves the cursor
        up one line so that the next redraw lands above it

        Args:
            message (Any): The error message. Anything other than a non-empty
                str displays the default message

        Returns:
            BasePrompt: This prompt

        Raises:
            Nothing
        """

        if not isinstance(message, str) or len(message) == 0:
            message = constants.DEFAULT_ERROR_MESSAGE

        logger.debug("Displaying error %r", message)

        self.terminal.erase_line()
        self.terminal.set_foreground(self.config.error_color)
        self.terminal.write(constants.ERROR_MARKER)
        self.terminal.reset_attributes()
        self.terminal.write(message)
        self.terminal.cursor_up(1)
        self.terminal.flush()

        return self

    def validate(
        self: "BasePrompt", value: Any, callback: Callable[[Any], Any]
    ) -> None:
        """
        Runs the configured validator against the provided value. The callback
        receives True when the value is valid or False/an error message when
        it isn't. If the validator returns a Pending outcome, the callback is
        called when that outcome is resolved

        Args:
            value (Any): The value to validate
            callback (Callable[[Any], Any]): Receives the validation result

        Returns:
            Nothing

        Raises:
            Exception: Whatever the configured validator raises
        """

        settle(self.options.validate(value), callback)

    def filter(self: "BasePrompt", value: Any, callback: Callable[[Any], Any]) -> None:
        """
        Runs the configured filter against the provided value. The callback
        receives the filtered value, immediately or when a returned Pending
        outcome is resolved

        Args:
            value (Any): The value to filter
            callback (Callable[[Any], Any]): Receives the filtered value

        Returns:
            Nothing

        Raises:
            Exception: Whatever the configured filter raises
        """

        settle(self.options.filter(value), callback)

    def prefix(self: "BasePrompt", text: str | None = None) -> str:
        return (
            "["
            + self.terminal.stylize(
                constants.QUESTION_GLYPH, self.config.question_color
            )
            + "] "
            + (text or "")
        )

    def suffix(self: "BasePrompt", text: str | None = None) -> str:
        return (text or "") + constants.QUESTION_SEPARATOR

    def get_question(self: "BasePrompt") -> str:
        """
        Returns the question line of this prompt. The default is shown in
        parentheses until the prompt has been answered

        Args:
            None

        Returns:
            str: The question line

        Raises:
            Nothing
        """

        question: str = self.prefix() + (self.options.message or "") + self.suffix()

        if self.options.default is not None and not self.answered:
            question += f"({self.options.default}) "

        return question
