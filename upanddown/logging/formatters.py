"""Formatters for game log output."""

from upanddown.models.card import RANK_NAMES, Card, Suit
from upanddown.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "H2" for Hearts Two, "S10" for Spades Ten).
    """
    return f"{SUIT_CODES[card.suit]}{RANK_NAMES[card.rank]}"


def format_cards(cards: list[Card]) -> str:
    """Format cards to comma-separated string, keeping their order.

    Returns:
        Comma-separated card strings (e.g., "H2,SK,C10").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_player(player: Player) -> dict[str, str | int]:
    """Format a player's visible state to dict."""
    return {
        "name": player.name,
        "hand": format_cards(player.hand),
        "draw_pile": player.draw_count(),
    }
