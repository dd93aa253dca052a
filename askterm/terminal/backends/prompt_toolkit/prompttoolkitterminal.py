import io

from prompt_toolkit.data_structures import Size
from prompt_toolkit.output import ColorDepth, Output, create_output
from prompt_toolkit.output.vt100 import Vt100_Output
from prompt_toolkit.styles import Style

from .... import constants
from ...abstract import TerminalBackend


class PromptToolkitTerminal(TerminalBackend):
    __output: Output
    __style: Style

    def __init__(self: "PromptToolkitTerminal", output: Output | None = None) -> None:
        # NOTE: prefer the tty so that anything printed to a redirected stdout
        # (i.e., the final answer) isn't mixed with the prompt drawing
        self.__output = (
            output if output is not None else create_output(always_prefer_tty=True)
        )
        self.__style = Style([])

    @property
    def color_depth(self: "PromptToolkitTerminal") -> ColorDepth:
        return self.output.get_default_color_depth()

    def cursor_left(self: "PromptToolkitTerminal", columns: int) -> None:
        self.output.cursor_backward(columns)

    def cursor_up(self: "PromptToolkitTerminal", lines: int) -> None:
        self.output.cursor_up(lines)

    def erase_line(self: "PromptToolkitTerminal") -> None:
        # the Output interface only erases to the end of the line so seek to
        # the first column before erasing
        self.output.cursor_backward(constants.CLEAN_CURSOR_COLUMNS)
        self.output.erase_end_of_line()

    def flush(self: "PromptToolkitTerminal") -> None:
        self.output.flush()

    @property
    def output(self: "PromptToolkitTerminal") -> Output:
        return self.__output

    def reset_attributes(self: "PromptToolkitTerminal") -> None:
        self.output.reset_attributes()

    def set_foreground(self: "PromptToolkitTerminal", color: str) -> None:
        self.output.set_attributes(
            self.__style.get_attrs_for_style_str(f"fg:{color}"), self.color_depth
        )

    def stylize(self: "PromptToolkitTerminal", text: str, color: str) -> str:
        # render the escape sequences into a scratch buffer using the same
        # color depth as the real output
        buffer: io.StringIO = io.StringIO()
        scratch_output: Vt100_Output = Vt100_Output(
            buffer,
            lambda: Size(rows=1, columns=len(text) + 1),
            default_color_depth=self.color_depth,
        )

        scratch_output.set_attributes(
            self.__style.get_attrs_for_style_str(f"fg:{color}"), self.color_depth
        )
        scratch_output.write(text)
        scratch_output.reset_attributes()
        scratch_output.flush()

        return buffer.getvalue()

    def write(self: "PromptToolkitTerminal", text: str) -> None:
        # NOTE: Output.write() would mask the escape characters of text that
        # came from stylize() so this has to be written raw
        self.output.write_raw(text)
