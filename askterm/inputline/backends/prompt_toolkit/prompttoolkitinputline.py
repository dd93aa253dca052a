from typing import Dict, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.output import Output

from ...abstract import InputLine
from ....prompt.exceptions import UserExit


class PromptToolkitInputLine(InputLine):
    __session: PromptSession

    def __init__(
        self: "PromptToolkitInputLine",
        output: Output | None = None,
        *args: Tuple,
        **kwargs: Dict,
    ) -> None:
        super().__init__()

        self.__session = PromptSession(
            *args,  # type: ignore
            multiline=False,
            output=output,
            **kwargs,
        )

    def read_line(self: "PromptToolkitInputLine", message: str) -> str:
        try:
            return self.session.prompt(ANSI(message))
        except EOFError as eof:
            raise UserExit("EOFError while prompting for input") from eof
        except KeyboardInterrupt as interrupt:
            raise UserExit("Prompt interrupted by the user") from interrupt

    @property
    def session(self: "PromptToolkitInputLine") -> PromptSession:
        return self.__session
