"""
module askterm.prompt.variants.inputprompt

Contains the definition of the InputPrompt class, a prompt variant that asks
the user for a line of free text
"""

import logging
from typing import Any, Callable, List

from ..abstract import BasePrompt

logger = logging.getLogger(__name__)


class InputPrompt(BasePrompt):
    """
    class InputPrompt

    A prompt variant that asks the user for a line of free text. Submitting an
    empty line answers the default, if there is one. Answers are validated on
    submission and invalid answers are asked for again
    """

    _done: Callable[[Any], Any]

    def _run(self: "InputPrompt", callback: Callable[[Any], Any]) -> None:
        self._done = callback
        self._ask()

    def _ask(self: "InputPrompt") -> None:
        # rejected answers are asked for again in this loop. only a verdict
        # delivered later by a Pending outcome continues from its callback
        while True:
            answer: Any = self._read_answer()

            synchronous: bool = True
            verdicts: List[Any] = []

            def on_validated(verdict: Any, answer: Any = answer) -> None:
                if synchronous:
                    verdicts.append(verdict)
                elif not self._settle_answer(answer, verdict):
                    self._ask()

            self.validate(answer, on_validated)
            synchronous = False

            if len(verdicts) == 0 or self._settle_answer(answer, verdicts[0]):
                return

    def _read_answer(self: "InputPrompt") -> Any:
        question: str = self.get_question()
        self.height = len(question.split("\n"))

        # the input line draws the question itself, so only the last line of a
        # multi-line question goes to it
        *leading_lines, last_line = question.split("\n")
        for line in leading_lines:
            self.terminal.write(line + "\n")
        self.terminal.flush()

        return self._filter_input(self.input_line.read_line(last_line))

    def _filter_input(self: "InputPrompt", user_input: str) -> Any:
        if len(user_input) > 0:
            return user_input

        return self.options.default if self.options.default is not None else ""

    def _settle_answer(self: "InputPrompt", answer: Any, verdict: Any) -> bool:
        if verdict is True:
            self.answered = True

            # remove the question along with the line the enter key left behind
            # and redraw it with the answer in place of the default
            self.clean(1)
            self._render_answer(self._display_answer(answer))
            self._done(answer)
            return True

        logger.debug("Rejected answer %r: %r", answer, verdict)
        self.error(verdict).clean()
        return False

    def _display_answer(self: "InputPrompt", answer: Any) -> str:
        return str(answer)

    def _render_answer(self: "InputPrompt", display_answer: str) -> None:
        question: str = self.get_question()

        self.terminal.write(
            question
            + self.terminal.stylize(display_answer, self.config.answer_color)
            + "\n"
        )
        self.terminal.flush()

        self.height = len(question.split("\n"))
