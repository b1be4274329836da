"""Configuration and logging setup for TradeJournal.

Settings are read from ``~/.config/tradejournal/config.toml``. A missing
file means defaults for everything.
"""

import logging
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.console import Console
from rich.logging import RichHandler

from tradejournal.analysis.sentiment import KEY_WORD_LIMIT, Lexicon

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tradejournal" / "config.toml"

LOG_FORMAT = "%(message)s"


class SentimentSettings(BaseModel):
    lexicon: Optional[Path] = Field(default=None, description="Path to a lexicon TOML file")
    key_word_limit: int = Field(default=KEY_WORD_LIMIT, ge=1, description="Key words per insight")


class LoggingSettings(BaseModel):
    level: str = Field(default="WARNING", description="Root log level")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class CaptureSettings(BaseModel):
    enabled: bool = Field(default=True, description="Offer dictation in the entry form")


class Settings(BaseModel):
    """Top-level TradeJournal settings."""

    sentiment: SentimentSettings = Field(default_factory=SentimentSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    capture: CaptureSettings = Field(default_factory=CaptureSettings)

    def load_lexicon(self) -> Lexicon:
        """Return the configured lexicon, or the built-in one."""
        if self.sentiment.lexicon is None:
            return Lexicon.default()
        return Lexicon.from_file(self.sentiment.lexicon.expanduser())


def load_config(path: Optional[Path] = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Config file path. Defaults to the user config location.

    Returns:
        Parsed settings; defaults when the default file does not exist.

    Raises:
        ValueError: If the file is not valid TOML, holds invalid values,
            or an explicitly given path does not exist.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise ValueError(f"Config file not found: {config_path}")
        return Settings()

    try:
        data = toml.load(config_path)
    except toml.TomlDecodeError as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid config file {config_path}:\n{e}") from e


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    """Route log records through rich to stderr."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)
