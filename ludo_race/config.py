import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    TOKENS_PER_PLAYER: int = 4
    RESERVE_SLOTS: int = 4
    HOME_SLOTS: int = 4
    DICE_FACES: int = 6
    EXIT_ROLL: int = 6  # also the roll that grants another throw

    # Standard layout (see board.standard_layout)
    RING_SIZE: int = int(os.getenv("RING_SIZE", 52))

    # Driver / CLI
    PLY_DELAY: float = float(os.getenv("PLY_DELAY", 0.0))  # seconds between plies
    MAX_PLIES: int = int(os.getenv("MAX_PLIES", 10_000))
    GAMES: int = int(os.getenv("NGAMES", 10))  # matches per CLI series
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEFAULT_STRATEGIES: list[str] = field(
        default_factory=lambda: [
            name.strip()
            for name in os.getenv("STRATEGIES", "random,laggard,vanguard,random").split(",")
            if name.strip()
        ]
    )

    def __post_init__(self):
        if self.RING_SIZE < 4:
            raise ValueError("RING_SIZE must be at least 4")
        if self.PLY_DELAY < 0:
            raise ValueError("PLY_DELAY cannot be negative")
        if self.MAX_PLIES < 1:
            raise ValueError("MAX_PLIES must be positive")
        if self.GAMES < 1:
            raise ValueError("GAMES must be positive")
        if not 1 <= self.EXIT_ROLL <= self.DICE_FACES:
            raise ValueError("EXIT_ROLL must be a face of the die")


config = Config()
