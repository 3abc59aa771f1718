#!/usr/bin/env python3
"""
Configuration Management for the Household Ledger

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class BudgetConfig:
    """Budget tracking thresholds."""

    # Progress ratio above which a monthly budget is flagged as a warning
    warning_threshold: Decimal = Decimal("0.85")


@dataclass
class RecurringConfig:
    """Recurring obligation settings."""

    upcoming_days_ahead: int = 30


@dataclass
class LedgerConfig:
    """Ledger aggregation settings."""

    # Discarded sub-cent precision accepted without a PrecisionWarning
    precision_tolerance_cents: int = 0
    history_months: int = 6


@dataclass
class Config:
    """
    Main configuration class for the household ledger.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path

    # Component configurations
    budgets: BudgetConfig
    recurring: RecurringConfig
    ledger: LedgerConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("HOUSEHOLD_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_household"
            data_dir = Path(os.getenv("HOUSEHOLD_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("HOUSEHOLD_DATA_DIR", "./data")).expanduser().resolve()

        budgets = BudgetConfig(
            warning_threshold=_parse_decimal(os.getenv("BUDGET_WARNING_THRESHOLD", "0.85")),
        )

        recurring = RecurringConfig(
            upcoming_days_ahead=int(os.getenv("UPCOMING_DAYS_AHEAD", "30")),
        )

        ledger = LedgerConfig(
            precision_tolerance_cents=int(os.getenv("PRECISION_TOLERANCE_CENTS", "0")),
            history_months=int(os.getenv("HISTORY_MONTHS", "6")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            budgets=budgets,
            recurring=recurring,
            ledger=ledger,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        threshold = self.budgets.warning_threshold
        if threshold.is_nan() or not Decimal(0) < threshold <= Decimal(1):
            errors.append("Budget warning threshold must be in (0, 1]")
        if self.recurring.upcoming_days_ahead < 0:
            errors.append("Upcoming days ahead must be non-negative")
        if self.ledger.precision_tolerance_cents < 0:
            errors.append("Precision tolerance must be non-negative")
        if self.ledger.history_months < 1:
            errors.append("History months must be at least 1")
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")
        logging.getLogger("household").setLevel(logging.DEBUG if self.debug else level)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                result[field_name] = {name: _plain(value) for name, value in field_value.__dict__.items()}
            else:
                result[field_name] = _plain(field_value)

        return result


def _plain(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    return value


def _parse_decimal(value: str) -> Decimal:
    """Parse a decimal setting; malformed values become NaN and fail validation."""
    try:
        return Decimal(value.strip())
    except InvalidOperation:
        return Decimal("NaN")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        try:
            config = Config.from_environment()
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration value: {e}") from e

        errors = config.validate()
        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

        _config = config

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
