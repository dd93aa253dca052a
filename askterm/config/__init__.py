"""
module askterm.config

Contains the definition of the AskTermConfig class used to store the display
and logging settings shared by all askterm prompts
"""

from .asktermconfig import AskTermConfig
