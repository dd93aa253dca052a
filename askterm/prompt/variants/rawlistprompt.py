"""
module askterm.prompt.variants.rawlistprompt

Contains the definition of the RawListPrompt class, a prompt variant that lists
numbered choices and asks the user for the number of one of them
"""

import logging
from typing import Any, List

from ... import constants
from ...choices import Choice
from ..exceptions import InvalidQuestionException
from .inputprompt import InputPrompt

logger = logging.getLogger(__name__)


class RawListPrompt(InputPrompt):
    """
    class RawListPrompt

    A prompt variant that lists numbered choices and asks the user for the
    number of one of them. Separators are listed but not numbered. The
    answer is the value of the picked choice and the default, if any, is
    the number picked by an empty answer
    """

    _selected: Choice | None

    def __init__(self: "RawListPrompt", *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)

        if not self.options.choices:
            raise InvalidQuestionException("A raw list prompt requires choices")

        self._selected = None

    @property
    def selectable_choices(self: "RawListPrompt") -> List[Choice]:
        return [choice for choice in self.options.choices if isinstance(choice, Choice)]

    def _read_answer(self: "RawListPrompt") -> Any:
        while True:
            lines: List[str] = self.get_question().split("\n") + self._choice_lines()
            for line in lines:
                self.terminal.write(line + "\n")
            self.terminal.flush()

            # the answer line sits below the listed choices
            self.height = len(lines) + 1

            user_input: str = self.input_line.read_line(
                constants.RAWLIST_ANSWER_PROMPT
            )
            self._selected = self._choice_for(self._filter_input(user_input))
            if self._selected is not None:
                return self._selected.value

            self.error(constants.RAWLIST_INVALID_INDEX_MESSAGE).clean()

    def _choice_for(self: "RawListPrompt", user_input: Any) -> Choice | None:
        try:
            index: int = int(str(user_input).strip())
        except ValueError:
            logger.debug("Answer %r is not a choice number", user_input)
            return None

        if not 1 <= index <= len(self.selectable_choices):
            logger.debug("Answer %r is out of range", index)
            return None

        return self.selectable_choices[index - 1]

    def _choice_lines(self: "RawListPrompt") -> List[str]:
        lines: List[str] = []
        number: int = 0

        for choice in self.options.choices:
            if isinstance(choice, Choice):
                number += 1
                lines.append(f"{constants.RAWLIST_INDENT}{number}) {choice.name}")
            else:
                lines.append(f"{constants.RAWLIST_INDENT}{choice}")

        return lines

    def _display_answer(self: "RawListPrompt", answer: Any) -> str:
        return self._selected.name if self._selected is not None else str(answer)
