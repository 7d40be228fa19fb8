from __future__ import annotations

from typing import Dict, Type

from ..errors import UnknownStrategyError
from .base import BaseStrategy
from .manual import ManualStrategy
from .progress import LaggardStrategy, VanguardStrategy
from .random_strategy import RandomStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    RandomStrategy.name: RandomStrategy,
    LaggardStrategy.name: LaggardStrategy,
    VanguardStrategy.name: VanguardStrategy,
    ManualStrategy.name: ManualStrategy,
}

# Alternative names for the progress strategies
ALIASES: Dict[str, str] = {
    "cluster": LaggardStrategy.name,
    "eager": VanguardStrategy.name,
}


def resolve_name(strategy_name: str) -> str:
    name = strategy_name.strip().lower()
    name = ALIASES.get(name, name)
    if name not in STRATEGY_REGISTRY:
        raise UnknownStrategyError(
            f"Unknown strategy '{strategy_name}'. Available: {sorted(STRATEGY_REGISTRY)}"
        )
    return name


def create(strategy_name: str, **kwargs) -> BaseStrategy:
    cls = STRATEGY_REGISTRY[resolve_name(strategy_name)]
    return cls(**kwargs)


def available(ignore_manual: bool = True) -> Dict[str, Type[BaseStrategy]]:
    if ignore_manual:
        return {
            name: cls
            for name, cls in STRATEGY_REGISTRY.items()
            if name != ManualStrategy.name
        }
    return dict(STRATEGY_REGISTRY)
