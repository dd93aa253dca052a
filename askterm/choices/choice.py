"""
module askterm.choices.choice

Contains the definition of the Choice dataclass, a single selectable entry
of a prompt's choice list, and the UNSET marker for a choice without a value
"""

from dataclasses import dataclass
from typing import Any


class _Unset:
    def __repr__(self: "_Unset") -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class Choice:
    """
    class Choice

    A single selectable entry of a prompt's choice list. The name is what is
    displayed to the user and the value is what is answered when it is picked.
    A choice created without a value answers its name once normalized
    """

    name: str
    value: Any = UNSET
