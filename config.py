"""
Central configuration for the tic-tac-toe engine and its console front end.
Pydantic models for type-safe configuration management.
"""
from __future__ import annotations

import os
import logging
import json
from typing import Dict, Any, Optional

from pydantic import BaseModel, Field, field_validator


class EngineSettings(BaseModel):
    """Game setup settings."""

    board_size: int = Field(default=3, ge=1, le=6, description="Board side length N")
    first_player: str = Field(default="X", description="Player who moves first (X or O)")

    @field_validator('board_size', mode='before')
    @classmethod
    def validate_int_fields(cls, v):
        return int(v)

    @field_validator('first_player', mode='before')
    @classmethod
    def validate_first_player(cls, v):
        v_upper = str(v).strip().upper()
        if v_upper not in ('X', 'O'):
            raise ValueError("first_player must be 'X' or 'O'")
        return v_upper


class UISettings(BaseModel):
    """Console display and interaction settings."""

    use_unicode: bool = Field(default=False, description="Use Unicode box drawing for the board")
    show_scores: bool = Field(default=False, description="Print the engine's per-move scores")
    human_player: str = Field(default="O", description="Side played by the human (X, O or none)")

    @field_validator('use_unicode', 'show_scores', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        if isinstance(v, str):
            return v.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(v)

    @field_validator('human_player', mode='before')
    @classmethod
    def validate_human_player(cls, v):
        v_norm = str(v).strip()
        if v_norm.upper() in ('X', 'O'):
            return v_norm.upper()
        if v_norm.lower() == 'none':
            return 'none'
        raise ValueError("human_player must be 'X', 'O' or 'none'")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="tictactoe.log", description="Log file path")

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

    engine: EngineSettings = Field(default_factory=EngineSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'TicTacToeConfig':
        """Create configuration from environment variables."""
        return cls(
            engine=EngineSettings(
                board_size=os.getenv('TICTACTOE_SIZE', '3'),
                first_player=os.getenv('TICTACTOE_FIRST', 'X'),
            ),
            ui=UISettings(
                use_unicode=os.getenv('TICTACTOE_UNICODE', 'false'),
                show_scores=os.getenv('TICTACTOE_SHOW_SCORES', 'false'),
                human_player=os.getenv('TICTACTOE_HUMAN', 'O'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('TICTACTOE_LOG_LEVEL', 'INFO'),
                log_to_file=os.getenv('TICTACTOE_LOG_FILE', 'false').lower() == 'true',
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'engine': self.engine.model_dump(),
            'ui': self.ui.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'TicTacToeConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            engine=EngineSettings(**data.get('engine', {})),
            ui=UISettings(**data.get('ui', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration from dictionary, re-validating each section."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                merged = {**section_model.model_dump(), **settings}
                setattr(self, section, type(section_model)(**merged))


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


# Convenience functions for common configuration access
def get_engine_settings() -> EngineSettings:
    """Get engine configuration settings."""
    return get_config().engine


def get_ui_settings() -> UISettings:
    """Get UI configuration settings."""
    return get_config().ui


def get_logging_settings() -> LoggingSettings:
    """Get logging configuration settings."""
    return get_config().logging


def setup_logging() -> None:
    """Configure root logging once, from the logging settings."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = get_logging_settings()
    level: int = getattr(logging, settings.log_level, logging.INFO)
    handlers = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
