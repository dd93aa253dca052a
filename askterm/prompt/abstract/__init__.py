"""
module askterm.prompt.abstract

Contains the definition of the BasePrompt base class that is extended by
every prompt variant (i.e., input, confirm, rawlist)
"""

from .baseprompt import BasePrompt
