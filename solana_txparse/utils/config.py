"""
Configuration management for solana-txparse.

This module provides utilities for loading and accessing configuration settings
from environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from solana_txparse.utils.error_handling import ConfigurationError

# Configure logger
logger = logging.getLogger(__name__)

VALID_COMMITMENTS = ["processed", "confirmed", "finalized"]


@dataclass
class SolanaSettings:
    """Solana JSON-RPC connection settings."""

    # RPC endpoint URL
    RPC_URL: str

    # Connection settings
    REQUEST_TIMEOUT: float = 30.0
    MAX_RETRIES: int = 3
    RETRY_DELAY: float = 1.0

    # Commitment level
    COMMITMENT: str = "finalized"

    # getSignaturesForAddress page size (the node caps it at 1000)
    SIGNATURES_PER_REQUEST: int = 1000

    def validate(self) -> None:
        """Validate Solana settings.

        Raises:
            ConfigurationError: If settings are invalid
        """
        if not self.RPC_URL:
            raise ConfigurationError(
                "Solana RPC URL is required",
                details={"setting": "RPC_URL"}
            )

        if self.REQUEST_TIMEOUT <= 0:
            raise ConfigurationError(
                "Request timeout must be positive",
                details={"setting": "REQUEST_TIMEOUT", "value": self.REQUEST_TIMEOUT}
            )

        if self.MAX_RETRIES < 0:
            raise ConfigurationError(
                "Max retries must be non-negative",
                details={"setting": "MAX_RETRIES", "value": self.MAX_RETRIES}
            )

        if self.COMMITMENT not in VALID_COMMITMENTS:
            raise ConfigurationError(
                f"Invalid commitment level: {self.COMMITMENT}",
                details={
                    "setting": "COMMITMENT",
                    "value": self.COMMITMENT,
                    "valid_values": VALID_COMMITMENTS
                }
            )

        if not 0 < self.SIGNATURES_PER_REQUEST <= 1000:
            raise ConfigurationError(
                f"Signatures per request must be between 1 and 1000: {self.SIGNATURES_PER_REQUEST}",
                details={"setting": "SIGNATURES_PER_REQUEST", "value": self.SIGNATURES_PER_REQUEST}
            )


@dataclass
class LoggingSettings:
    """Logging configuration settings."""

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    LOG_FILE: Optional[str] = None

    def validate(self) -> None:
        """Validate logging settings.

        Raises:
            ConfigurationError: If settings are invalid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.LOG_LEVEL not in valid_levels:
            raise ConfigurationError(
                f"Invalid log level: {self.LOG_LEVEL}",
                details={
                    "setting": "LOG_LEVEL",
                    "value": self.LOG_LEVEL,
                    "valid_values": valid_levels
                }
            )


@dataclass
class Settings:
    """Global settings."""

    solana: SolanaSettings
    logging: LoggingSettings

    def validate(self) -> None:
        """Validate all settings.

        Raises:
            ConfigurationError: If any settings are invalid
        """
        self.solana.validate()
        self.logging.validate()


def load_from_env() -> Settings:
    """Load settings from environment variables.

    Returns:
        Settings object with values from environment variables

    Raises:
        ConfigurationError: If a numeric variable cannot be parsed
    """
    try:
        solana = SolanaSettings(
            RPC_URL=os.environ.get("SOLANA_RPC_URL", "https://api.mainnet-beta.solana.com"),
            REQUEST_TIMEOUT=float(os.environ.get("SOLANA_REQUEST_TIMEOUT", "30.0")),
            MAX_RETRIES=int(os.environ.get("SOLANA_MAX_RETRIES", "3")),
            RETRY_DELAY=float(os.environ.get("SOLANA_RETRY_DELAY", "1.0")),
            COMMITMENT=os.environ.get("SOLANA_COMMITMENT", "finalized"),
            SIGNATURES_PER_REQUEST=int(os.environ.get("SOLANA_SIGNATURES_PER_REQUEST", "1000")),
        )
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid numeric setting: {e}",
            details={"original_error": str(e)}
        ) from e

    logging_settings = LoggingSettings(
        LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO").upper(),
        LOG_FORMAT=os.environ.get("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
        LOG_DATE_FORMAT=os.environ.get("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S"),
        LOG_FILE=os.environ.get("LOG_FILE"),
    )

    return Settings(solana=solana, logging=logging_settings)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the current settings.

    Settings are loaded from the environment and validated on first use.

    Returns:
        Current settings object
    """
    global _settings

    if _settings is None:
        settings = load_from_env()
        try:
            settings.validate()
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            raise
        _settings = settings

    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call reloads the environment."""
    global _settings
    _settings = None


def get_solana_settings() -> SolanaSettings:
    """Get Solana-specific settings."""
    return get_settings().solana


def get_logging_settings() -> LoggingSettings:
    """Get logging-specific settings."""
    return get_settings().logging
