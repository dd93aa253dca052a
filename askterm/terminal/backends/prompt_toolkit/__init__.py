"""
module askterm.terminal.backends.prompt_toolkit

Contains the definition of the PromptToolkitTerminal class, a terminal backend
that drives the terminal through a prompt_toolkit Output
"""

from .prompttoolkitterminal import PromptToolkitTerminal
