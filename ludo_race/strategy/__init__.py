"""Decision strategies: given a roll and the legal moves, pick one."""

from .base import BaseStrategy
from .manual import ManualStrategy
from .progress import LaggardStrategy, VanguardStrategy, origin_progress
from .random_strategy import RandomStrategy
from .registry import ALIASES, STRATEGY_REGISTRY, available, create

__all__ = [
    "BaseStrategy",
    "RandomStrategy",
    "LaggardStrategy",
    "VanguardStrategy",
    "ManualStrategy",
    "origin_progress",
    "STRATEGY_REGISTRY",
    "ALIASES",
    "available",
    "create",
]
