"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from upanddown.utils.logger import setup_logging


class RulesConfig(BaseModel):
    """Rules configuration."""

    initial_hand_size: int = 5
    max_hand_size: int = 10  # Drawing is blocked at this many hand cards
    swap_min_hand_size: int = 8
    swap_hand_size: int = 5  # Cards taken back into the hand after a swap
    max_name_length: int = 20


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class GameLogConfig(BaseModel):
    """Configuration for the JSONL event log."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = RulesConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()


def configure_logging(config: Config) -> None:
    """Apply the logging section of a config.

    Args:
        config: Loaded configuration.
    """
    setup_logging(config.logging.level)
