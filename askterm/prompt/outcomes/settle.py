"""
module askterm.prompt.outcomes.settle

Contains the definition of settle(), which forwards the result of a
validate or filter function to a callback once it is available
"""

import logging
from typing import Any, Callable

from .pending import Pending
from .ready import Ready

logger = logging.getLogger(__name__)


def settle(outcome: Any, callback: Callable[[Any], Any]) -> None:
    """
    Forwards the provided outcome to the callback. Ready outcomes and plain
    values are forwarded before this function returns while Pending outcomes
    are forwarded whenever they are resolved

    Args:
        outcome (Any): The value returned by a validate or filter function
        callback (Callable[[Any], Any]): The callback to forward the value to

    Returns:
        Nothing

    Raises:
        PendingAlreadyBoundException: If a Pending outcome already has a consumer
    """

    match outcome:
        case Pending():
            logger.debug("Deferring callback until %r is resolved", outcome)
            outcome.then(callback)
        case Ready(value=value):
            callback(value)
        case _:
            callback(outcome)
