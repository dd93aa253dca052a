"""
module askterm.prompt.exceptions

Contains all definitions of exceptions specifically thrown while
constructing or running prompts
"""

from .invalidquestionexception import InvalidQuestionException
from .pendingalreadyboundexception import PendingAlreadyBoundException
from .promptexception import PromptException
from .userexit import UserExit
