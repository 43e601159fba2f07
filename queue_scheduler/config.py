"""
Configuration and logging setup for the queue scheduler.
"""

import logging
from typing import Any, Dict, Optional

from .types import QueueConfig, SelectionStrategy


DEFAULT_CONFIG: Dict[str, Any] = {
    'SELECTION_STRATEGY': 'linear',
    'LOG_LEVEL': 'WARNING',
}

LOG_FORMAT = '[%(asctime)s] %(levelname)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def load_config(overrides: Optional[Dict[str, Any]] = None) -> QueueConfig:
    """
    Build a queue configuration from the defaults and any overrides.

    Args:
        overrides: Optional configuration dictionary

    Returns:
        Validated queue configuration

    Raises:
        ValueError: If the strategy or log level is unknown
    """
    settings = dict(DEFAULT_CONFIG)

    if overrides:
        settings.update(overrides)

    try:
        selection = SelectionStrategy(settings['SELECTION_STRATEGY'])
    except ValueError:
        raise ValueError(
            f"Unknown selection strategy: {settings['SELECTION_STRATEGY']!r}"
        ) from None

    log_level = _validate_log_level(settings['LOG_LEVEL'])

    return QueueConfig(selection=selection, log_level=log_level)


def _validate_log_level(level: Any) -> str:
    name = str(level).upper()
    if name not in _LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    return name


def configure_logging(config: Optional[QueueConfig] = None) -> None:
    """
    Configure root logging for applications using the queues.

    Args:
        config: Queue configuration whose log_level is applied;
            defaults to load_config()

    Raises:
        ValueError: If the configured log level is unknown
    """
    config = config or load_config()
    level = _validate_log_level(config.log_level)

    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )
