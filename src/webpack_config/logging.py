"""
Centralized logging configuration.

Provides bootstrap_logging so every entry point (CLI tasks, tests, scripts
embedding the library) configures logging the same way, using Python's
native INI format.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# Shipped with the package, used when the project has no logging.ini
PACKAGED_LOGGING_CONFIG = Path(__file__).parent / 'config' / 'logging.ini'


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then falls back
    to the copy packaged with webpack_config.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    current_dir_config = Path('logging.ini')
    if current_dir_config.exists():
        return current_dir_config

    if PACKAGED_LOGGING_CONFIG.exists():
        return PACKAGED_LOGGING_CONFIG

    return None


def _setup_environment_variables():
    """
    Set up environment variables for logging configuration.

    Sets LOG_LEVEL to INFO if not already set, ensuring the INI file has a valid value.
    """
    if 'LOG_LEVEL' not in os.environ:
        os.environ['LOG_LEVEL'] = 'INFO'

    log_level = os.environ['LOG_LEVEL'].strip().upper()
    if log_level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        os.environ['LOG_LEVEL'] = 'INFO'


def _basic_config():
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr
    )


def bootstrap_logging(name: Optional[str] = None, debug: bool = False) -> None:
    """
    Bootstrap logging configuration using Python's native INI format.

    This function:
    1. Sets up environment variables for INI file substitution
    2. Loads logging configuration from logging.ini using logging.config.fileConfig()
    3. Applies the LOG_LEVEL environment variable (or DEBUG when debug=True)

    Args:
        name: Optional name for the logger (defaults to root logger)
        debug: Force DEBUG level for the webpack_config loggers
    """
    _setup_environment_variables()

    config_path = _find_logging_config()

    if config_path is None:
        print("Warning: No logging.ini file found, using basic logging configuration", file=sys.stderr)
        _basic_config()
    else:
        try:
            logging.config.fileConfig(
                str(config_path),
                defaults={'LOG_LEVEL': os.environ['LOG_LEVEL'].strip().upper()},
                disable_existing_loggers=False
            )
        except Exception as e:
            # fileConfig raises a mix of KeyError/ValueError/configparser errors
            print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
            print("Using basic logging configuration", file=sys.stderr)
            _basic_config()

    env_level = 'DEBUG' if debug else os.environ['LOG_LEVEL'].strip().upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, env_level))
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, env_level))
    logging.getLogger('webpack_config').setLevel(getattr(logging, env_level))

    if name:
        logging.getLogger(name).debug(f"Logging configured for {name} from {config_path}")
    else:
        logging.debug(f"Logging configured for root logger from {config_path}")
