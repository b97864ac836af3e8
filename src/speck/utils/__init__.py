"""Utilities module for speck."""

from speck.utils.logging import get_logger
from speck.utils.seeds import seed_everything
from speck.utils.timing import Timer, timer

__all__ = [
    "get_logger",
    "seed_everything",
    "Timer",
    "timer",
]
