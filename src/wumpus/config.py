"""Configuration for Hunt the Wumpus."""

import os
from dataclasses import dataclass
from pathlib import Path

from .engine.monster import MOVE_CHANCE
from .engine.state import ARROW_CAPACITY


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Game configuration."""

    seed: int | None = None
    cheat: bool = False
    arrows: int = ARROW_CAPACITY
    move_chance: float = MOVE_CHANCE
    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    hide_spoilers: bool = True

    def __post_init__(self):
        if self.arrows < 1:
            raise ValueError(f"need at least one arrow, got {self.arrows}")
        if not 0.0 <= self.move_chance <= 1.0:
            raise ValueError(f"move chance must be within [0, 1]: {self.move_chance}")

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        seed = os.getenv("WUMPUS_SEED")
        log_file = os.getenv("WUMPUS_LOG_FILE")

        return cls(
            seed=int(seed) if seed else None,
            cheat=_env_flag("WUMPUS_CHEAT", cls.cheat),
            arrows=int(os.getenv("WUMPUS_ARROWS", str(cls.arrows))),
            move_chance=float(os.getenv("WUMPUS_MOVE_CHANCE", str(cls.move_chance))),
            log_level=os.getenv("WUMPUS_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=_env_flag("WUMPUS_JSON_LOGS", cls.json_logs),
            hide_spoilers=_env_flag("WUMPUS_HIDE_SPOILERS", cls.hide_spoilers),
        )
