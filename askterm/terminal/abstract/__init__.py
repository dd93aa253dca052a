"""
module askterm.terminal.abstract

Contains the definition of the TerminalBackend abstract base class that
is implemented by individual terminal integrations (i.e., prompt_toolkit)
"""

from .terminalbackend import TerminalBackend
