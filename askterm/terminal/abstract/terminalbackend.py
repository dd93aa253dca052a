"""
module askterm.terminal.abstract.terminalbackend

Contains the definition of the TerminalBackend class, an abstract base class that
is extended by all askterm terminal integrations (i.e., prompt_toolkit)
"""

from abc import ABCMeta, abstractmethod


class TerminalBackend(metaclass=ABCMeta):
    """
    class TerminalBackend

    Abstract base class that is extended by all askterm terminal
    integrations (i.e., prompt_toolkit). Prompts assume they have exclusive
    control of the terminal while they run
    """

    def clean_lines(self: "TerminalBackend", count: int) -> None:
        """
        Erases the current line and the count - 1 lines above it, leaving the
        cursor on the topmost erased line

        Args:
            count (int): The number of lines to erase. Nothing is erased when
                this is zero or less

        Returns:
            Nothing

        Raises:
            Nothing
        """

        for line_index in range(count):
            if line_index > 0:
                self.cursor_up(1)

            self.erase_line()

    @abstractmethod
    def cursor_left(self: "TerminalBackend", columns: int) -> None:
        """
        Moves the cursor left by the provided number of columns, stopping
        at the first column

        Args:
            columns (int): The number of columns to move by

        Returns:
            Nothing

        Raises:
            Nothing
        """

    @abstractmethod
    def cursor_up(self: "TerminalBackend", lines: int) -> None:
        """
        Moves the cursor up by the provided number of lines

        Args:
            lines (int): The number of lines to move by

        Returns:
            Nothing

        Raises:
            Nothing
        """

    @abstractmethod
    def erase_line(self: "TerminalBackend") -> None:
        """
        Erases the entire line the cursor is on and moves the cursor to
        its first column

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

    @abstractmethod
    def flush(self: "TerminalBackend") -> None:
        """
        Sends any buffered output to the terminal

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

    @abstractmethod
    def reset_attributes(self: "TerminalBackend") -> None:
        """
        Resets the display attributes (color, weight, etc.) of any text
        written afterwards

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

    @abstractmethod
    def set_foreground(self: "TerminalBackend", color: str) -> None:
        """
        Sets the foreground color of any text written afterwards

        Args:
            color (str): The name of the color (i.e., ansired)

        Returns:
            Nothing

        Raises:
            Nothing
        """

    @abstractmethod
    def stylize(self: "TerminalBackend", text: str, color: str) -> str:
        """
        Returns the provided text wrapped in whatever the terminal needs to
        display it in the provided foreground color

        Args:
            text (str): The text to color
            color (str): The name of the color (i.e., ansigreen)

        Returns:
            str: The colored text, suitable for write()

        Raises:
            Nothing
        """

    @abstractmethod
    def write(self: "TerminalBackend", text: str) -> None:
        """
        Writes text at the cursor position. Text returned by stylize() keeps
        its coloring

        Args:
            text (str): The text to write

        Returns:
            Nothing

        Raises:
            Nothing
        """
