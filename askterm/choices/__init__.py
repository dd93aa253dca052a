"""
module askterm.choices

Contains the Choice and Separator classes and the normalize_choices() function
used to turn raw choice descriptors into the canonical form prompts read
"""

from .choice import UNSET, Choice
from .normalize import normalize_choices
from .separator import Separator
