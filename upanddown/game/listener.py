"""Notification interface for observers of the game engine.

Presentation layers subclass GameListener and override only the events
they care about. Every hook defaults to doing nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from upanddown.models.card import Card
    from upanddown.models.player import Player


class GameListener:
    """Base class for game event observers.

    Hooks are called synchronously, right after the state change they
    describe. A hook must not call back into the engine.
    """

    def after_game_started(self) -> None:
        """Called once a new game has been dealt."""

    def after_turn_advanced(self) -> None:
        """Called when the turn passes to the other player."""

    def after_card_played(self, player: Player, stack_id: int) -> None:
        """Called after player placed a card on center pile stack_id."""

    def after_card_drawn(self, card: Card) -> None:
        """Called after the current player drew card."""

    def after_cards_swapped(self) -> None:
        """Called after the current player swapped hand and draw pile."""

    def after_pass(self, player: Player) -> None:
        """Called after player passed."""

    def after_game_ended(self, winner: Player | None, is_draw: bool) -> None:
        """Called when the game is decided.

        Args:
            winner: Winning player, None on a draw.
            is_draw: True if both players ended with equal hands.
        """

    def after_game_restarted(self) -> None:
        """Called after the running game was dropped."""
