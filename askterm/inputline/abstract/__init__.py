"""
module askterm.inputline.abstract

Contains the definition of the InputLine abstract base class that is
implemented by individual line-reading integrations (i.e., prompt_toolkit)
"""

from .inputline import InputLine
