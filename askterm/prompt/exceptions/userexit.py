"""
module askterm.prompt.exceptions.userexit

Contains the definition of the UserExit exception class, an exception
thrown whenever the user has performed an expected action that represents
intent to stop answering (i.e., end of input or an interrupt)
"""

from .promptexception import PromptException


class UserExit(PromptException):
    """
    class UserExit

    An exception thrown whenever the user has performed an expected action
    that represents intent to stop answering
    """
