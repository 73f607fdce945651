"""Tests for the JSONL game logger."""

import json
import random

import pytest

from upanddown.config import GameLogConfig
from upanddown.game.engine import GameEngine
from upanddown.logging import GameLogger, format_card, format_cards, format_player
from upanddown.models.card import Card, Rank, Suit
from upanddown.models.player import Player


def read_events(path):
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f]


@pytest.fixture
def engine():
    return GameEngine(rng=random.Random(3))


@pytest.fixture
def log_config(tmp_path):
    return GameLogConfig(enabled=True, output_path=str(tmp_path / "logs" / "game.jsonl"))


class TestFormatters:
    """Tests for log formatters."""

    def test_format_card(self):
        assert format_card(Card(suit=Suit.HEARTS, rank=Rank.TWO)) == "H2"
        assert format_card(Card(suit=Suit.SPADES, rank=Rank.TEN)) == "S10"
        assert format_card(Card(suit=Suit.CLUBS, rank=Rank.KING)) == "CK"
        assert format_card(Card(suit=Suit.DIAMONDS, rank=Rank.ACE)) == "DA"

    def test_format_cards_keeps_order(self):
        cards = [Card(suit=Suit.SPADES, rank=Rank.KING), Card(suit=Suit.HEARTS, rank=Rank.TWO)]
        assert format_cards(cards) == "SK,H2"
        assert format_cards([]) == ""

    def test_format_player(self):
        player = Player(
            name="Alice",
            hand=[Card(suit=Suit.HEARTS, rank=Rank.TWO)],
            draw_pile=[Card(suit=Suit.HEARTS, rank=Rank.THREE)],
        )
        assert format_player(player) == {"name": "Alice", "hand": "H2", "draw_pile": 1}


class TestGameLogger:
    """Tests for GameLogger class."""

    def test_logs_game_events(self, engine, log_config):
        with GameLogger(engine, log_config):
            engine.start_game("Alice", "Bob")
            drawn = engine.session.player1.draw_pile[-1]
            engine.draw_card()

        events = read_events(log_config.output_path)

        assert [e["type"] for e in events] == ["game_start", "draw"]
        start, draw = events
        assert [p["name"] for p in start["players"]] == ["Alice", "Bob"]
        assert start["players"][0]["draw_pile"] == 20
        assert len(start["center"]) == 2
        assert draw == {
            "type": "draw",
            "turn": 1,
            "player": "Alice",
            "card": format_card(drawn),
            "draw_pile": 19,
        }

    def test_logs_play_and_end(self, engine, log_config):
        engine.start_game("Alice", "Bob")
        session = engine.session
        three = Card(suit=Suit.HEARTS, rank=Rank.THREE)
        session.player1.hand = [three]
        session.player1.draw_pile = []
        session.center_pile1 = [Card(suit=Suit.HEARTS, rank=Rank.TWO)]

        with GameLogger(engine, log_config):
            engine.play_card(three, 0)

        play, end = read_events(log_config.output_path)
        assert play["type"] == "play"
        assert play["card"] == "H3"
        assert play["stack"] == 0
        assert play["hand"] == ""
        assert end["type"] == "game_end"
        assert end["winner"] == "Alice"
        assert end["is_draw"] is False
        assert end["hand_sizes"] == {"Alice": 0, "Bob": 5}

    def test_logs_swap_pass_and_restart(self, engine, log_config):
        engine.start_game("Alice", "Bob")
        session = engine.session
        session.player1.hand = [Card(suit=Suit.SPADES, rank=r) for r in list(Rank)[:8]]

        with GameLogger(engine, log_config):
            engine.swap_cards()
            session.player2.hand = [Card(suit=Suit.CLUBS, rank=Rank.KING)]
            session.player2.draw_pile = []
            session.center_pile1 = [Card(suit=Suit.CLUBS, rank=Rank.SEVEN)]
            session.center_pile2 = [Card(suit=Suit.DIAMONDS, rank=Rank.SEVEN)]
            engine.pass_turn()
            engine.restart_game()

        swap, passed, restart = read_events(log_config.output_path)
        assert swap["type"] == "swap"
        assert len(swap["hand"].split(",")) == 5
        assert passed == {"type": "pass", "turn": 2, "player": "Bob"}
        assert restart["type"] == "restart"

    def test_stops_listening_on_exit(self, engine, log_config):
        with GameLogger(engine, log_config):
            engine.start_game("Alice", "Bob")
        engine.draw_card()

        assert len(read_events(log_config.output_path)) == 1

    def test_disabled_writes_nothing(self, engine, tmp_path):
        path = tmp_path / "game.jsonl"
        with GameLogger(engine, GameLogConfig(enabled=False, output_path=str(path))):
            engine.start_game("Alice", "Bob")

        assert not path.exists()
