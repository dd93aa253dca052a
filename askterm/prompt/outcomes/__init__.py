"""
module askterm.prompt.outcomes

Contains the outcome types a validate or filter function may return to say
whether its result is available now (Ready) or will be delivered later (Pending)
"""

from .pending import Pending
from .ready import Ready
from .settle import settle
