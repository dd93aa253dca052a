"""
module askterm.prompt.variants.confirmprompt

Contains the definition of the ConfirmPrompt class, a prompt variant that asks
the user a yes or no question
"""

from dataclasses import replace
from typing import Any

from .inputprompt import InputPrompt


class ConfirmPrompt(InputPrompt):
    """
    class ConfirmPrompt

    A prompt variant that asks the user a yes or no question. Answers starting
    with 'y' mean yes, any other answer means no, and an empty answer means
    the default (yes unless a default of False was provided)
    """

    _default_answer: bool

    def __init__(self: "ConfirmPrompt", *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)

        self._default_answer = (
            self.options.default if isinstance(self.options.default, bool) else True
        )

        # the default hint shows which answer an empty line picks
        self.options = replace(
            self.options, default="Y/n" if self._default_answer else "y/N"
        )

    def _filter_input(self: "ConfirmPrompt", user_input: str) -> bool:
        user_input = user_input.strip()

        if len(user_input) == 0:
            return self._default_answer

        return user_input.lower().startswith("y")

    def _display_answer(self: "ConfirmPrompt", answer: Any) -> str:
        return "Yes" if answer else "No"
