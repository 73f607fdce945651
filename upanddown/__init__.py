"""UpAndDown two-player card game rule engine."""

from .config import Config, configure_logging, load_config
from .exceptions import (
    InvalidPlayerNameError,
    InvalidStackIdError,
    NoActiveGameError,
    UpAndDownError,
)
from .game import GameEngine, GameListener
from .models import Card, GameSession, Player, Rank, Suit, cyclic_distance

__all__ = [
    "Card",
    "Config",
    "configure_logging",
    "GameEngine",
    "GameListener",
    "GameSession",
    "InvalidPlayerNameError",
    "InvalidStackIdError",
    "NoActiveGameError",
    "Player",
    "Rank",
    "Suit",
    "UpAndDownError",
    "cyclic_distance",
    "load_config",
]
