"""Game engine for UpAndDown."""

from __future__ import annotations

import logging
import random

from upanddown.config import Config
from upanddown.exceptions import NoActiveGameError
from upanddown.models.card import Card, create_full_deck
from upanddown.models.game_state import GameSession
from upanddown.models.player import Player

from .listener import GameListener
from .validator import MoveValidator, validate_player_names

logger = logging.getLogger(__name__)


class GameEngine:
    """Rule engine for a two-player game of UpAndDown.

    Owns the running session, executes player actions and notifies
    registered listeners after every completed action. Actions the rules
    do not allow at the moment are ignored; callers should check the
    matching ``can_*`` query first.
    """

    def __init__(
        self,
        config: Config | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            rng: Random source for shuffling (a fresh one if not provided)
        """
        self.config = config or Config()
        self.rules = self.config.rules
        self.validator = MoveValidator(self.rules)

        self._rng = rng or random.Random()
        self._session: GameSession | None = None
        self._listeners: list[GameListener] = []

    # Listeners

    def add_listener(self, listener: GameListener) -> None:
        """Register a listener for game events."""
        self._listeners.append(listener)

    def add_listeners(self, *listeners: GameListener) -> None:
        """Register several listeners at once."""
        self._listeners.extend(listeners)

    def remove_listener(self, listener: GameListener) -> None:
        """Unregister a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, hook: str, *args: object) -> None:
        for listener in list(self._listeners):
            getattr(listener, hook)(*args)

    # Session

    @property
    def session(self) -> GameSession:
        """Get the running session.

        Raises:
            NoActiveGameError: If no game has been started.
        """
        if self._session is None:
            raise NoActiveGameError()
        return self._session

    def has_active_game(self) -> bool:
        """Check if a game has been started and not dropped."""
        return self._session is not None

    def start_game(self, name1: str, name2: str) -> None:
        """Deal a new game, replacing any running one.

        Args:
            name1: Name of the player who moves first
            name2: Name of the second player

        Raises:
            InvalidPlayerNameError: If a name is blank, too long, or both match.
        """
        validate_player_names(name1, name2, self.rules.max_name_length)

        deck = create_full_deck()
        self._rng.shuffle(deck)

        hand_size = self.rules.initial_hand_size
        player1 = Player(name=name1, hand=deck[:hand_size])
        player2 = Player(name=name2, hand=deck[hand_size:hand_size * 2])

        remaining = deck[hand_size * 2:]
        half = len(remaining) // 2
        player1.draw_pile = remaining[:half]
        player2.draw_pile = remaining[half:]

        self._session = GameSession(
            player1=player1,
            player2=player2,
            current_player=player1,
            center_pile1=[player1.draw_pile.pop()],
            center_pile2=[player2.draw_pile.pop()],
        )

        logger.info(f"Game started: {name1} vs {name2}")
        logger.debug(f"Center piles: {self._session.top_card(0)} {self._session.top_card(1)}")
        self._notify("after_game_started")

    def restart_game(self) -> None:
        """Drop the running game so that a new one can be set up."""
        self._session = None
        logger.info("Game restarted")
        self._notify("after_game_restarted")

    # Queries

    def can_play_card(self, card: Card, stack_id: int) -> bool:
        """Check if card may be placed on center pile stack_id.

        Raises:
            NoActiveGameError: If no game has been started.
            InvalidStackIdError: If stack_id is not 0 or 1.
        """
        return self.validator.validate_play(self.session, card, stack_id).is_valid

    def can_draw_card(self) -> bool:
        """Check if the current player may draw."""
        return self.validator.validate_draw(self.session.current_player).is_valid

    def can_swap_cards(self) -> bool:
        """Check if the current player may swap hand and draw pile."""
        return self.validator.validate_swap(self.session.current_player).is_valid

    def can_pass(self) -> bool:
        """Check if the current player has no other legal action."""
        return self.validator.validate_pass(self.session).is_valid

    # Actions

    def play_card(self, card: Card, stack_id: int) -> None:
        """Place a card from the current player's hand on a center pile.

        Args:
            card: Card from the current player's hand
            stack_id: Center pile, 0 or 1
        """
        session = self.session
        player = session.current_player

        validation = self.validator.validate_play(session, card, stack_id)
        if not validation.is_valid:
            logger.debug(f"Play rejected: {validation.error_message}")
            return
        if card not in player.hand:
            logger.debug(f"Play rejected: {card} is not in {player.name}'s hand")
            return

        player.hand.remove(card)
        session.center_pile(stack_id).append(card)
        session.last_action_was_pass = False
        session.turn_number += 1
        logger.debug(f"{player.name} played {card} on pile {stack_id}")

        self._notify("after_card_played", player, stack_id)

        if not player.has_cards():
            self._end_game(winner=player, is_draw=False)
            return

        self._advance_turn()

    def draw_card(self) -> None:
        """Move the top card of the current player's draw pile to the hand."""
        session = self.session
        player = session.current_player

        validation = self.validator.validate_draw(player)
        if not validation.is_valid:
            logger.debug(f"Draw rejected: {validation.error_message}")
            return

        card = player.draw_pile.pop()
        player.hand.append(card)
        session.last_action_was_pass = False
        session.turn_number += 1
        logger.debug(f"{player.name} drew {card}")

        self._notify("after_card_drawn", card)
        self._advance_turn()

    def swap_cards(self) -> None:
        """Shuffle the hand into the draw pile and take a fresh hand."""
        session = self.session
        player = session.current_player

        validation = self.validator.validate_swap(player)
        if not validation.is_valid:
            logger.debug(f"Swap rejected: {validation.error_message}")
            return

        player.draw_pile.extend(player.hand)
        player.hand.clear()
        self._rng.shuffle(player.draw_pile)

        split = max(len(player.draw_pile) - self.rules.swap_hand_size, 0)
        player.hand.extend(player.draw_pile[split:])
        del player.draw_pile[split:]

        session.last_action_was_pass = False
        session.turn_number += 1
        logger.debug(f"{player.name} swapped cards, new hand: {player.hand}")

        self._notify("after_cards_swapped")
        self._advance_turn()

    def pass_turn(self) -> None:
        """Pass. A second pass in a row ends the game."""
        session = self.session
        player = session.current_player

        validation = self.validator.validate_pass(session)
        if not validation.is_valid:
            logger.debug(f"Pass rejected: {validation.error_message}")
            return

        session.turn_number += 1

        if session.last_action_was_pass:
            logger.debug(f"{player.name} passed again, comparing hands")
            self._resolve_by_hand_size()
            return

        session.last_action_was_pass = True
        logger.debug(f"{player.name} passed")

        self._notify("after_pass", player)
        self._advance_turn()

    # Turn and end-game handling

    def _advance_turn(self) -> None:
        """Hand the turn to the other player."""
        session = self.session
        session.current_player = session.opponent
        logger.debug(f"Turn {session.turn_number}: {session.current_player.name} to move")
        self._notify("after_turn_advanced")

    def _resolve_by_hand_size(self) -> None:
        """Decide the game after two passes: fewer hand cards wins."""
        session = self.session
        current = session.current_player
        opponent = session.opponent

        if current.hand_count() < opponent.hand_count():
            self._end_game(winner=current, is_draw=False)
        elif current.hand_count() > opponent.hand_count():
            self._end_game(winner=opponent, is_draw=False)
        else:
            self._end_game(winner=None, is_draw=True)

    def _end_game(self, winner: Player | None, is_draw: bool) -> None:
        session = self.session
        session.is_over = True
        session.winner = winner
        session.is_draw = is_draw

        if is_draw:
            logger.info(f"Game ended in a draw after {session.turn_number} turns")
        else:
            logger.info(f"Game ended: {winner.name} wins after {session.turn_number} turns")

        self._notify("after_game_ended", winner, is_draw)
