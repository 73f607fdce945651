"""Player model."""

from pydantic import BaseModel, Field

from .card import Card


class Player(BaseModel):
    """Player state: visible hand and private draw pile.

    The draw pile is a stack; its last element is the top. The model only
    rejects empty names; the length limit and uniqueness depend on the rules
    and are checked by validate_player_names before a game is dealt.
    """

    name: str = Field(min_length=1)
    hand: list[Card] = Field(default_factory=list)
    draw_pile: list[Card] = Field(default_factory=list)

    def hand_count(self) -> int:
        """Get number of cards in hand."""
        return len(self.hand)

    def draw_count(self) -> int:
        """Get number of cards left in the draw pile."""
        return len(self.draw_pile)

    def has_cards(self) -> bool:
        """Check if the player still holds or can draw any card."""
        return bool(self.hand or self.draw_pile)

    def __str__(self) -> str:
        return f"{self.name} [hand={self.hand_count()}, draw={self.draw_count()}]"

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, hand={self.hand!r}, draw_pile={self.draw_count()})"
