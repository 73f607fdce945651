"""Game logger for detailed game replay."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from upanddown.config import GameLogConfig
from upanddown.game.listener import GameListener
from upanddown.models.card import Card
from upanddown.models.player import Player

from .formatters import format_card, format_cards, format_player

if TYPE_CHECKING:
    from upanddown.game.engine import GameEngine


class GameLogger(GameListener):
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    The logger listens to an engine while its context is open.
    """

    def __init__(self, engine: GameEngine, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            engine: Engine whose events are logged.
            config: Logging configuration. If None, logging is disabled.
        """
        self.engine = engine
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> GameLogger:
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
            self.engine.add_listener(self)
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Stop listening and close the log file."""
        self.engine.remove_listener(self)
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def _turn(self) -> int:
        return self.engine.session.turn_number

    def after_game_started(self) -> None:
        session = self.engine.session
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "players": [format_player(p) for p in session.players],
            "center": [format_card(session.top_card(0)), format_card(session.top_card(1))],
        })

    def after_card_played(self, player: Player, stack_id: int) -> None:
        session = self.engine.session
        self._write({
            "type": "play",
            "turn": self._turn(),
            "player": player.name,
            "card": format_card(session.top_card(stack_id)),
            "stack": stack_id,
            "hand": format_cards(player.hand),
        })

    def after_card_drawn(self, card: Card) -> None:
        player = self.engine.session.current_player
        self._write({
            "type": "draw",
            "turn": self._turn(),
            "player": player.name,
            "card": format_card(card),
            "draw_pile": player.draw_count(),
        })

    def after_cards_swapped(self) -> None:
        player = self.engine.session.current_player
        self._write({
            "type": "swap",
            "turn": self._turn(),
            "player": player.name,
            "hand": format_cards(player.hand),
            "draw_pile": player.draw_count(),
        })

    def after_pass(self, player: Player) -> None:
        self._write({
            "type": "pass",
            "turn": self._turn(),
            "player": player.name,
        })

    def after_game_ended(self, winner: Player | None, is_draw: bool) -> None:
        session = self.engine.session
        self._write({
            "type": "game_end",
            "turn": self._turn(),
            "winner": winner.name if winner else None,
            "is_draw": is_draw,
            "hand_sizes": {p.name: p.hand_count() for p in session.players},
        })

    def after_game_restarted(self) -> None:
        self._write({
            "type": "restart",
            "timestamp": datetime.now().isoformat(),
        })
