"""
module askterm.choices.separator

Contains the definition of the Separator class, a non-selectable entry used
to visually group the entries of a choice list
"""

from dataclasses import dataclass

from .. import constants


@dataclass(frozen=True)
class Separator:
    """
    class Separator

    A non-selectable entry used to visually group the entries of a choice list
    """

    line: str = constants.SEPARATOR_LINE

    def __str__(self: "Separator") -> str:
        return self.line
