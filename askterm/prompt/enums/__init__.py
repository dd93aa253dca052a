"""
module askterm.prompt.enums

Contains the definitions of all enum classes that are shared by the
available prompt variants
"""

from .prompttype import PromptType
