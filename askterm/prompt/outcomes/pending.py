"""
module askterm.prompt.outcomes.pending

Contains the definition of the Pending class, a one-shot outcome whose value
is delivered some time after the validate or filter function has returned
"""

import logging
from typing import Any, Callable

from ..exceptions import PendingAlreadyBoundException

logger = logging.getLogger(__name__)


class Pending:
    """
    class Pending

    A one-shot outcome whose value is delivered later by calling resolve().
    Only the first call to resolve() is honored and the value is delivered
    to the single consumer attached with then(). There is no timeout: a
    Pending that is never resolved never delivers
    """

    __callback: Callable[[Any], Any] | None
    __resolved: bool
    __value: Any

    def __init__(self: "Pending") -> None:
        self.__callback = None
        self.__resolved = False
        self.__value = None

    @property
    def bound(self: "Pending") -> bool:
        """
        Returns whether or not a consumer has been attached to this outcome

        Args:
            None

        Returns:
            bool: True if then() has been called on this outcome

        Raises:
            Nothing
        """

        return self.__callback is not None

    @property
    def resolved(self: "Pending") -> bool:
        """
        Returns whether or not resolve() has been called on this outcome

        Args:
            None

        Returns:
            bool: True if this outcome has a value

        Raises:
            Nothing
        """

        return self.__resolved

    def resolve(self: "Pending", value: Any = None) -> None:
        """
        Delivers the value of this outcome. Calls after the first one are
        ignored

        Args:
            value (Any): The value to deliver

        Returns:
            Nothing

        Raises:
            Exception: Whatever the attached consumer raises
        """

        if self.__resolved:
            logger.debug("Ignoring repeated resolution of %r with %r", self, value)
            return

        self.__resolved = True
        self.__value = value

        if self.__callback is not None:
            self.__callback(value)

    def then(self: "Pending", callback: Callable[[Any], Any]) -> None:
        """
        Attaches the consumer that receives the value of this outcome. If the
        outcome was already resolved, the consumer is called immediately

        Args:
            callback (Callable[[Any], Any]): The consumer to attach

        Returns:
            Nothing

        Raises:
            PendingAlreadyBoundException: If a consumer was already attached
        """

        if self.__callback is not None:
            raise PendingAlreadyBoundException(
                "This pending outcome already delivers to another consumer"
            )

        self.__callback = callback

        if self.__resolved:
            callback(self.__value)

    def __repr__(self: "Pending") -> str:
        return f"Pending(resolved={self.__resolved}, bound={self.bound})"
