"""
module askterm.prompt.outcomes.ready

Contains the definition of the Ready dataclass, an outcome whose value
is available immediately
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ready:
    """
    class Ready

    An outcome whose value is available immediately. Returning Ready(value)
    from a validate or filter function is the same as returning value
    """

    value: Any = None
