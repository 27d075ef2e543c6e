"""Utility modules: config, logging, errors."""
import os
import logging
import sys
from typing import Dict, Any, Optional

from dotenv import load_dotenv

# Load .env file for local development
load_dotenv()

logger = logging.getLogger(__name__)


# ============================================================================
# ERRORS
# ============================================================================

class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


class DataFetchError(Exception):
    """Raised when the raw Unicode data cannot be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class AnnotationFormatError(Exception):
    """Raised when an annotations document does not have the CLDR layout."""
    pass


# ============================================================================
# CONFIGURATION
# ============================================================================

DEFAULT_PORT = 8080
DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_ANNOTATIONS_LOCALE = 'en'


def _parse_version(raw: str) -> Optional[float]:
    if not raw:
        return None
    return float(raw)


def _parse_port(raw: str) -> int:
    port = int(raw)
    if not 1 <= port <= 65535:
        raise ValueError(f"port {port} out of range")
    return port


def _parse_timeout(raw: str) -> float:
    timeout = float(raw)
    if timeout <= 0:
        raise ValueError("timeout must be positive")
    return timeout


def validate_config() -> Dict[str, Any]:
    """
    Read and validate configuration values from environment variables.

    Every value is optional; unset variables fall back to defaults.

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If any variable holds a value that cannot be used
    """
    optional_vars = {
        'unicode_version': ('UNICODE_EMOJI_VERSION', '', _parse_version),
        'annotations_locale': ('CLDR_ANNOTATIONS_LOCALE', DEFAULT_ANNOTATIONS_LOCALE, str),
        'emoji_data_url': ('EMOJI_DATA_URL', '', str),
        'annotations_url': ('EMOJI_ANNOTATIONS_URL', '', str),
        'port': ('SERVER_PORT', str(DEFAULT_PORT), _parse_port),
        'fetch_timeout': ('FETCH_TIMEOUT_SECONDS', str(DEFAULT_FETCH_TIMEOUT), _parse_timeout),
        'log_level': ('LOG_LEVEL', 'INFO', str),
    }

    config = {}
    invalid = []

    for key, (env_var, default, parse) in optional_vars.items():
        value = os.getenv(env_var, '').strip() or default
        try:
            config[key] = parse(value)
        except ValueError:
            invalid.append(env_var)

    if invalid:
        raise ConfigError(f"Invalid values for environment variables: {invalid}")

    logger.info("Configuration validated successfully")
    logger.info(f"Unicode version: {config['unicode_version'] or 'latest'}, port: {config['port']}")
    return config


# ============================================================================
# LOGGING
# ============================================================================

def setup_logging(level: str = "INFO", structured: bool = True) -> None:
    """Configure logging for the application."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    if structured:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "name": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('tornado.access').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)
