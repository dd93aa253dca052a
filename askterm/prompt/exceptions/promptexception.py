"""
module askterm.prompt.exceptions.promptexception

Contains the definition of the PromptException class which is the parent
class of all exceptions that can be thrown directly by prompts.
"""

from ...asktermexception import AskTermException


class PromptException(AskTermException):
    """
    class PromptException

    Parent class of all exceptions that can be thrown directly by prompts.
    """
