"""
module askterm.choices.normalize

Contains the definition of normalize_choices(), which converts a sequence of
raw choice descriptors into a list of Choice and Separator instances
"""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, List, Sequence

from .choice import UNSET, Choice
from .separator import Separator


def _normalize_choice(raw_choice: Any) -> Choice | Separator:
    match raw_choice:
        case Separator():
            return raw_choice
        case Choice(name=name, value=value) if value is UNSET:
            return replace(raw_choice, value=name)
        case Choice():
            return raw_choice
        case Mapping():
            return Choice(
                name=raw_choice["name"],
                value=raw_choice.get("value", raw_choice["name"]),
            )
        case _:
            return Choice(name=str(raw_choice), value=raw_choice)


def normalize_choices(raw_choices: Sequence[Any]) -> List[Choice | Separator]:
    """
    Converts a sequence of raw choice descriptors into a new list of Choice and
    Separator instances. Strings and other plain values become a Choice named
    after the value, mappings must provide a 'name' and may provide a 'value'

    Args:
        raw_choices (Sequence[Any]): The raw choice descriptors to normalize

    Returns:
        List[Choice | Separator]: The normalized choice list in the same order

    Raises:
        KeyError: If a mapping descriptor does not have a 'name' key
    """

    return [_normalize_choice(raw_choice) for raw_choice in raw_choices]
