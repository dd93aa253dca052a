"""
module askterm.prompt.exceptions.invalidquestionexception

Contains the definition of the InvalidQuestionException class, an exception
thrown when a question mapping contains an option that is not recognized
"""

from .promptexception import PromptException


class InvalidQuestionException(PromptException):
    """
    class InvalidQuestionException

    An exception thrown when a question mapping contains an option that
    is not recognized
    """
