"""Hunt the Wumpus in a dodecahedral cave."""

from .config import Config
from .logging import configure_logging, get_logger

__all__ = ["main", "Config"]


def main() -> None:
    """Entry point for the game."""
    from .console import play
    from .session import HuntSession

    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
        hide_spoilers=config.hide_spoilers and not config.cheat,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        seed=config.seed,
        cheat=config.cheat,
        arrows=config.arrows,
    )

    play(HuntSession(config))
