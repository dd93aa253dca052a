"""
module askterm.inputline.abstract.inputline

Contains the definition of the InputLine class, an abstract base class that
is extended by all askterm line-reading integrations (i.e., prompt_toolkit)
"""

from abc import ABCMeta, abstractmethod


class InputLine(metaclass=ABCMeta):
    """
    class InputLine

    Abstract base class that is extended by all askterm line-reading
    integrations (i.e., prompt_toolkit). Prompts hold a reference to one
    but never own it
    """

    @abstractmethod
    def read_line(self: "InputLine", message: str) -> str:
        """
        Displays the provided message on the current line and returns the
        line the user submits after it. The cursor ends up at the start of
        the following line

        Args:
            message (str): The text to display before the user's input. May
                contain ANSI styling

        Returns:
            str: The line the user submitted

        Raises:
            UserExit: If the user ended input or interrupted the prompt
        """
