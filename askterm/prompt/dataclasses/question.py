"""
module askterm.prompt.dataclasses.question

Contains the definition of the Question dataclass, the set of options that
describe the question a single prompt asks
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Sequence, Type

from ..exceptions import InvalidQuestionException


def always_valid(_: Any) -> bool:
    return True


def identity(value: Any) -> Any:
    return value


@dataclass
class Question:
    """
    class Question

    The set of options that describe the question a single prompt asks.
    validate returns True, False, or an error message (or a Ready/Pending
    outcome of one of those) and filter returns the transformed answer
    """

    message: str | None = None
    default: Any = None
    choices: Sequence[Any] | None = None
    validate: Callable[[Any], Any] = always_valid
    filter: Callable[[Any], Any] = identity

    @classmethod
    def from_dict(
        cls: Type["Question"], question_data: Mapping[str, Any]
    ) -> "Question":
        """
        Constructs a Question instance from the provided mapping of options.
        A validate or filter of None is treated as not provided

        Args:
            question_data (Mapping[str, Any]): The question options

        Returns:
            Question: A Question instance containing the provided options

        Raises:
            InvalidQuestionException: If the mapping contains an option that
                is not recognized
        """

        known_options = {field.name for field in fields(cls)}
        if unknown_options := sorted(set(question_data) - known_options):
            raise InvalidQuestionException(
                f"Unrecognized question option(s): {', '.join(unknown_options)}"
            )

        return cls(
            **{
                option: value
                for option, value in question_data.items()
                if not (option in ("validate", "filter") and value is None)
            }
        )
