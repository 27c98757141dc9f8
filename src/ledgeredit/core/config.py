#!/usr/bin/env python3
"""
Configuration Management for the Ledger Account Editor

Handles environment-based configuration with safe defaults and validation.
Supports multiple environments (development, test, production); the data
directory and the posting-line layout are taken from the environment.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_AMOUNT_COLUMN = 30
DEFAULT_MIN_GAP = 2
DEFAULT_FALLBACK_INDENT = "    "


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class EditorConfig:
    """Layout settings used when a posting line is rewritten."""

    # Column (counted from the start of the account name) where amounts begin
    amount_column: int = DEFAULT_AMOUNT_COLUMN
    # Spaces kept between account and amount when the account is too long
    min_gap: int = DEFAULT_MIN_GAP
    fallback_indent: str = DEFAULT_FALLBACK_INDENT


@dataclass
class Config:
    """
    Main configuration class for the ledger editor.

    Loads configuration from environment variables with defaults suited to a
    personal ledger kept under a local data directory.
    """

    environment: Environment

    data_dir: Path
    store_file: Path

    editor: EditorConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("LEDGEREDIT_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_ledgeredit"
            data_dir = Path(os.getenv("LEDGEREDIT_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("LEDGEREDIT_DATA_DIR", "./data")).expanduser().resolve()

        data_dir.mkdir(parents=True, exist_ok=True)

        store_override = os.getenv("LEDGEREDIT_STORE_FILE")
        store_file = Path(store_override).expanduser() if store_override else data_dir / "editor_state.json"

        editor = EditorConfig(
            amount_column=int(os.getenv("LEDGEREDIT_AMOUNT_COLUMN", str(DEFAULT_AMOUNT_COLUMN))),
            min_gap=int(os.getenv("LEDGEREDIT_MIN_GAP", str(DEFAULT_MIN_GAP))),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            store_file=store_file,
            editor=editor,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if self.store_file.exists() and not self.store_file.is_file():
            errors.append(f"store_file is not a regular file: {self.store_file}")

        if self.editor.amount_column <= 0:
            errors.append("Amount column must be positive")
        # A zero gap would glue account and amount together and the line would
        # stop parsing as a posting
        if self.editor.min_gap < 1:
            errors.append("Minimum gap between account and amount must be at least 1")

        if not self.editor.fallback_indent or self.editor.fallback_indent.strip():
            errors.append("Fallback indent must be non-empty whitespace")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        if self.debug:
            logging.getLogger("ledgeredit").setLevel(logging.DEBUG)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, EditorConfig):
                result[field_name] = dict(field_value.__dict__)
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            # Don't cache an invalid configuration
            _config = None
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_store_file() -> Path:
    """Get the path of the editor state file."""
    return get_config().store_file


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
