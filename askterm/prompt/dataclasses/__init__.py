"""
module askterm.prompt.dataclasses

Contains all dataclass definitions related to describing the question
that a prompt asks
"""

from .question import Question
