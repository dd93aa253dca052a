"""
module askterm.utils.once

Contains the definition of once(), a wrapper that only lets the first
call through to the wrapped callable
"""

import functools
from typing import Any, Callable


def once(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Wraps the provided callable so that only its first invocation is
    forwarded. Every later invocation returns None without calling it

    Args:
        func (Callable[..., Any]): The callable to guard

    Returns:
        Callable[..., Any]: The guarded callable

    Raises:
        Nothing
    """

    called: bool = False

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        nonlocal called

        if called:
            return None

        called = True
        return func(*args, **kwargs)

    return wrapper
