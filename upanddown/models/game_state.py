"""Game session model."""

from pydantic import BaseModel, Field

from upanddown.exceptions import InvalidStackIdError

from .card import Card
from .player import Player

# Valid center pile selectors
STACK_IDS = (0, 1)


class GameSession(BaseModel):
    """State of one running game.

    ``current_player`` always refers to the ``player1`` or ``player2``
    object itself, never to a copy.
    """

    player1: Player
    player2: Player
    current_player: Player
    center_pile1: list[Card] = Field(default_factory=list)
    center_pile2: list[Card] = Field(default_factory=list)
    last_action_was_pass: bool = False
    turn_number: int = 0

    # Outcome
    is_over: bool = False
    winner: Player | None = None
    is_draw: bool = False

    @property
    def players(self) -> tuple[Player, Player]:
        """Both players in seat order."""
        return (self.player1, self.player2)

    @property
    def opponent(self) -> Player:
        """The player who is not on turn."""
        if self.current_player is self.player1:
            return self.player2
        return self.player1

    def center_pile(self, stack_id: int) -> list[Card]:
        """Get a center pile by id.

        Raises:
            InvalidStackIdError: If stack_id is not 0 or 1.
        """
        if stack_id == 0:
            return self.center_pile1
        if stack_id == 1:
            return self.center_pile2
        raise InvalidStackIdError(stack_id)

    def top_card(self, stack_id: int) -> Card:
        """Get the top card of a center pile."""
        return self.center_pile(stack_id)[-1]

    def all_cards(self) -> list[Card]:
        """Every card in the session, across all containers."""
        cards: list[Card] = []
        for player in self.players:
            cards.extend(player.hand)
            cards.extend(player.draw_pile)
        cards.extend(self.center_pile1)
        cards.extend(self.center_pile2)
        return cards

    def __str__(self) -> str:
        parts = [f"Turn {self.turn_number}"]
        if self.is_over:
            parts.append("[DRAW]" if self.is_draw else f"[WON BY {self.winner.name}]")
        elif self.last_action_was_pass:
            parts.append("[PASSED]")
        parts.append(f"{self.current_player.name}'s turn")
        parts.append(f"Piles: {self.top_card(0)} {self.top_card(1)}")
        return " ".join(parts)
