"""Move validation for player actions."""

from dataclasses import dataclass

from upanddown.config import RulesConfig
from upanddown.exceptions import InvalidPlayerNameError
from upanddown.models.card import Card, cyclic_distance
from upanddown.models.game_state import STACK_IDS, GameSession
from upanddown.models.player import Player


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""


def is_legal_play(top: Card, card: Card) -> bool:
    """Check if card may be placed on top.

    Adjacent ranks are legal in any suit. Ranks two apart are legal only
    within the same suit.
    """
    distance = abs(cyclic_distance(top, card))
    if distance == 1:
        return True
    return distance == 2 and card.suit == top.suit


def validate_player_names(name1: str, name2: str, max_length: int = 20) -> None:
    """Check both player names before a game is set up.

    Raises:
        InvalidPlayerNameError: If a name is blank, too long, or both are equal.
    """
    for name in (name1, name2):
        if not name or not name.strip():
            raise InvalidPlayerNameError("Player names cannot be blank")
        if len(name) > max_length:
            raise InvalidPlayerNameError(
                f"Player name {name!r} is longer than {max_length} characters"
            )
    if name1 == name2:
        raise InvalidPlayerNameError("Player names cannot be the same")


class MoveValidator:
    """Validates the four player actions against a session."""

    def __init__(self, rules: RulesConfig | None = None):
        """Initialize validator.

        Args:
            rules: Rules configuration (uses defaults if not provided)
        """
        self.rules = rules or RulesConfig()

    def validate_play(
        self,
        session: GameSession,
        card: Card,
        stack_id: int,
    ) -> ValidationResult:
        """Validate playing a card onto a center pile.

        Only the top card is considered, not hand ownership.

        Raises:
            InvalidStackIdError: If stack_id is not 0 or 1.
        """
        top = session.top_card(stack_id)
        if is_legal_play(top, card):
            return ValidationResult(is_valid=True)
        return ValidationResult(
            is_valid=False,
            error_message=f"{card} cannot be played on {top}",
        )

    def validate_draw(self, player: Player) -> ValidationResult:
        """Validate drawing the top card of the player's draw pile."""
        if not player.draw_pile:
            return ValidationResult(
                is_valid=False,
                error_message="Draw pile is empty",
            )
        if player.hand_count() >= self.rules.max_hand_size:
            return ValidationResult(
                is_valid=False,
                error_message=f"Hand already holds {self.rules.max_hand_size} cards",
            )
        return ValidationResult(is_valid=True)

    def validate_swap(self, player: Player) -> ValidationResult:
        """Validate swapping the whole hand with the draw pile."""
        if player.hand_count() < self.rules.swap_min_hand_size:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Swapping needs at least {self.rules.swap_min_hand_size} hand cards"
                ),
            )
        if not player.draw_pile:
            return ValidationResult(
                is_valid=False,
                error_message="Draw pile is empty",
            )
        return ValidationResult(is_valid=True)

    def validate_pass(self, session: GameSession) -> ValidationResult:
        """Validate passing: only allowed when no other action is legal."""
        player = session.current_player
        if self.validate_draw(player).is_valid:
            return ValidationResult(
                is_valid=False,
                error_message="Cannot pass while a card can be drawn",
            )
        if self.validate_swap(player).is_valid:
            return ValidationResult(
                is_valid=False,
                error_message="Cannot pass while cards can be swapped",
            )
        for card in player.hand:
            for stack_id in STACK_IDS:
                if self.validate_play(session, card, stack_id).is_valid:
                    return ValidationResult(
                        is_valid=False,
                        error_message=f"Cannot pass while {card} can be played",
                    )
        return ValidationResult(is_valid=True)
