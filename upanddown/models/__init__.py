"""Game models."""

from .card import Card, Rank, Suit, create_full_deck, cyclic_distance
from .game_state import STACK_IDS, GameSession
from .player import Player

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_full_deck",
    "cyclic_distance",
    "Player",
    "GameSession",
    "STACK_IDS",
]
