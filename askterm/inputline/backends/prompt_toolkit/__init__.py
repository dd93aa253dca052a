"""
module askterm.inputline.backends.prompt_toolkit

Contains the definition of the PromptToolkitInputLine class, an input line
that reads user input through a prompt_toolkit PromptSession
"""

from .prompttoolkitinputline import PromptToolkitInputLine
