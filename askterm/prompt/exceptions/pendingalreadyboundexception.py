"""
module askterm.prompt.exceptions.pendingalreadyboundexception

Contains the definition of the PendingAlreadyBoundException class, an exception
thrown when a second consumer is attached to a Pending outcome
"""

from .promptexception import PromptException


class PendingAlreadyBoundException(PromptException):
    """
    class PendingAlreadyBoundException

    An exception thrown when a second consumer is attached to a Pending
    outcome. A Pending outcome delivers its value to exactly one consumer
    """
