"""
module askterm.asktermexception

Contains the definition of the AskTermException class, the parent of all
exceptions directly thrown by askterm prompts and their collaborators
"""


class AskTermException(RuntimeError):
    """
    class AskTermException

    The parent class of all exceptions directly thrown by askterm
    """
