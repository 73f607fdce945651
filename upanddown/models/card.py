"""Card model and cyclic rank distance."""

from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit."""

    CLUBS = 0
    SPADES = 1
    HEARTS = 2
    DIAMONDS = 3


class Rank(IntEnum):
    """Card rank.

    Values are positions on a 13-step cycle: King wraps around to Ace.
    """

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


RANK_COUNT = len(Rank)

# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
}


class Card(BaseModel, frozen=True):
    """Single card representation."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


def cyclic_distance(a: Card, b: Card) -> int:
    """Signed rank distance from b to a on the rank cycle.

    Args:
        a: First card.
        b: Second card.

    Returns:
        Distance in the range [-6, 6]. Ace and King are one step apart.
    """
    d = (a.rank - b.rank) % RANK_COUNT
    if d > RANK_COUNT // 2:
        d -= RANK_COUNT
    return d


def create_full_deck() -> list[Card]:
    """Create the 52-card deck in suit-major order."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]
