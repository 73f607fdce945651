"""Game logic."""

from .engine import GameEngine
from .listener import GameListener
from .validator import MoveValidator, ValidationResult, is_legal_play, validate_player_names

__all__ = [
    "GameEngine",
    "GameListener",
    "MoveValidator",
    "ValidationResult",
    "is_legal_play",
    "validate_player_names",
]
