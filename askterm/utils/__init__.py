"""
module askterm.utils

Contains helpers shared across askterm that are not tied to prompts
or terminals specifically
"""

from .logging import setup_logging
from .once import once
