"""
Configuration for the TicTacToe game.
Pydantic models with defaults, environment overrides and JSON files.

Environment variables:
    TICTACTOE_TURN_SECONDS   seconds per turn before it passes (default 10)
    TICTACTOE_DELAY          computer "thinking" delay in seconds (default 0.7)
    TICTACTOE_SINGLE_PLAYER  true = play against the computer (default true)
    TICTACTOE_PRUNING        use alpha-beta pruning in the search (default false)
    TICTACTOE_FASTER_WINS    discount scores by depth (default false)
    TICTACTOE_LOG_LEVEL      DEBUG, INFO, WARNING or ERROR (default INFO)
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class GameSettings(BaseModel):
    """Session settings: turn countdown and computer opponent."""

    model_config = ConfigDict(validate_assignment=True)

    turn_seconds: int = Field(default=10, ge=1, description="Seconds per turn before it passes to the other player")
    computer_delay: float = Field(default=0.7, ge=0, description="Pause before the computer moves")
    single_player: bool = Field(default=True, description="Human (X) vs computer (O)")


class EngineSettings(BaseModel):
    """Move search settings. Neither option changes which move is optimal."""

    model_config = ConfigDict(validate_assignment=True)

    use_pruning: bool = Field(default=False, description="Alpha-beta pruning")
    prefer_faster_wins: bool = Field(default=False, description="Discount win/loss scores by search depth")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(validate_assignment=True)

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class TicTacToeConfig(BaseModel):
    """Main configuration model."""

    game: GameSettings = Field(default_factory=GameSettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> "TicTacToeConfig":
        """Create configuration from environment variables."""
        return cls(
            game=GameSettings(
                turn_seconds=int(os.getenv('TICTACTOE_TURN_SECONDS', '10')),
                computer_delay=float(os.getenv('TICTACTOE_DELAY', '0.7')),
                single_player=_env_flag('TICTACTOE_SINGLE_PLAYER', 'true'),
            ),
            engine=EngineSettings(
                use_pruning=_env_flag('TICTACTOE_PRUNING', 'false'),
                prefer_faster_wins=_env_flag('TICTACTOE_FASTER_WINS', 'false'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('TICTACTOE_LOG_LEVEL', 'INFO'),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'game': self.game.model_dump(),
            'engine': self.engine.model_dump(),
            'logging': self.logging.model_dump(),
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> "TicTacToeConfig":
        """Load configuration from JSON file. Missing sections keep their defaults."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            game=GameSettings(**data.get('game', {})),
            engine=EngineSettings(**data.get('engine', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            config_file=filepath,
        )


# Global configuration instance
_config: Optional[TicTacToeConfig] = None


def get_config() -> TicTacToeConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = TicTacToeConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> TicTacToeConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = TicTacToeConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once. Level defaults to the configured log_level."""
    if getattr(setup_logging, "_configured", False):
        return
    level_name = (level or get_config().logging.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
