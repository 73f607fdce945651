"""Shared fixtures for engine tests."""

import random

import pytest

from upanddown.game.engine import GameEngine
from upanddown.game.listener import GameListener
from upanddown.models.card import Card


class RecordingListener(GameListener):
    """Listener that records every event it receives."""

    def __init__(self):
        self.events: list[tuple] = []

    def names(self) -> list[str]:
        return [name for name, *_ in self.events]

    def clear(self) -> None:
        self.events.clear()

    def after_game_started(self):
        self.events.append(("game_started",))

    def after_turn_advanced(self):
        self.events.append(("turn_advanced",))

    def after_card_played(self, player, stack_id):
        self.events.append(("card_played", player, stack_id))

    def after_card_drawn(self, card):
        self.events.append(("card_drawn", card))

    def after_cards_swapped(self):
        self.events.append(("cards_swapped",))

    def after_pass(self, player):
        self.events.append(("pass", player))

    def after_game_ended(self, winner, is_draw):
        self.events.append(("game_ended", winner, is_draw))

    def after_game_restarted(self):
        self.events.append(("game_restarted",))


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def engine(listener):
    engine = GameEngine(rng=random.Random(42))
    engine.add_listener(listener)
    return engine


@pytest.fixture
def started(engine, listener):
    """Engine with a dealt game and an emptied event record."""
    engine.start_game("Alice", "Bob")
    listener.clear()
    return engine


@pytest.fixture
def rig(started):
    """Replace the dealt cards with a fixed layout."""

    def _rig(
        hand1: list[Card],
        hand2: list[Card],
        top1: Card,
        top2: Card,
        draw1: list[Card] | None = None,
        draw2: list[Card] | None = None,
    ):
        session = started.session
        session.player1.hand = list(hand1)
        session.player2.hand = list(hand2)
        session.player1.draw_pile = list(draw1 or [])
        session.player2.draw_pile = list(draw2 or [])
        session.center_pile1 = [top1]
        session.center_pile2 = [top2]
        return session

    return _rig
