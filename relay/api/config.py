"""Relay configuration.

Settings are read from the environment once at startup into an immutable
RelaySettings and handed to the app. Request handlers never touch os.environ.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

# Environment variable names
API_KEY_ENV = "OPENAI_API_KEY"
ASSISTANT_ID_ENV = "WORKER_ASSISTANT_ID"
PORT_ENV = "PORT"
HOST_ENV = "HOST"
LOG_FORMAT_ENV = "LOG_FORMAT"
LOG_LEVEL_ENV = "LOG_LEVEL"
POLL_INTERVAL_ENV = "RUN_POLL_INTERVAL_MS"

DEFAULT_PORT = 3001
DEFAULT_HOST = "0.0.0.0"
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class RelaySettings:
    """Everything the relay needs to serve requests."""

    api_key: str
    assistant_id: str
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_json: bool = True
    log_level: int = logging.INFO
    # None leaves the poll interval to the openai client
    poll_interval_ms: Optional[int] = None

    def __repr__(self) -> str:
        return (
            f"RelaySettings(assistant_id={self.assistant_id!r}, host={self.host!r}, "
            f"port={self.port}, log_json={self.log_json}, "
            f"poll_interval_ms={self.poll_interval_ms})"
        )


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"{PORT_ENV} must be an integer, got {raw!r}")
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"{PORT_ENV} must be between 1 and 65535, got {port}")
    return port


def _parse_poll_interval(raw: str) -> int:
    try:
        interval = int(raw)
    except ValueError:
        raise ConfigurationError(f"{POLL_INTERVAL_ENV} must be an integer, got {raw!r}")
    if interval <= 0:
        raise ConfigurationError(f"{POLL_INTERVAL_ENV} must be positive, got {interval}")
    return interval


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"{LOG_LEVEL_ENV} is not a valid log level: {raw!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> RelaySettings:
    """
    Build RelaySettings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigurationError: If OPENAI_API_KEY or WORKER_ASSISTANT_ID is unset
            or empty, or if an optional value cannot be parsed.
    """
    if environ is None:
        environ = os.environ

    api_key = environ.get(API_KEY_ENV, "")
    assistant_id = environ.get(ASSISTANT_ID_ENV, "")

    missing = [
        name for name, value in ((API_KEY_ENV, api_key), (ASSISTANT_ID_ENV, assistant_id))
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"Missing {' or '.join(missing)} in environment.", missing=missing
        )

    port = _parse_port(environ[PORT_ENV]) if environ.get(PORT_ENV) else DEFAULT_PORT

    log_format = environ.get(LOG_FORMAT_ENV, "json").lower()
    if log_format not in LOG_FORMATS:
        raise ConfigurationError(
            f"{LOG_FORMAT_ENV} must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
        )

    poll_raw = environ.get(POLL_INTERVAL_ENV)

    return RelaySettings(
        api_key=api_key,
        assistant_id=assistant_id,
        port=port,
        host=environ.get(HOST_ENV) or DEFAULT_HOST,
        log_json=log_format == "json",
        log_level=_parse_log_level(environ.get(LOG_LEVEL_ENV, "INFO")),
        poll_interval_ms=_parse_poll_interval(poll_raw) if poll_raw else None,
    )
