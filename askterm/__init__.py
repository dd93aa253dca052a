"""
module askterm.__init__

Contains the import of the BasePrompt class that every prompt variant extends.
Also contains definitions that indicate the current version of askterm.
"""

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

from .prompt.abstract import BasePrompt
