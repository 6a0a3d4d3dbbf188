"""Structured logging infrastructure for the relay.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a RelayLogger helper for request events.
Prompt and narrative text are never logged, only their lengths.
"""

import json
import logging
import sys
from datetime import datetime, timezone

# Extra record attributes copied into JSON output when present
EXTRA_FIELDS = (
    "thread_id",
    "run_id",
    "run_status",
    "duration",
    "error_type",
    "terminal_state",
    "prompt_length",
    "narrative_length",
)

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Route relay and uvicorn records through a single stderr handler.

    uvicorn is started with log_config=None, so its loggers propagate here
    and share the relay's format.
    """
    formatter = JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # force=True drops handlers installed before settings were known
    logging.basicConfig(level=level, handlers=[handler], force=True)


class RelayLogger:
    """Logger for /ask-worker request events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("relay.requests")

    def ask_received(self, prompt_length: int) -> None:
        self.logger.info("Relaying prompt to worker assistant", extra={"prompt_length": prompt_length})

    def run_finished(self, thread_id: str, run_id: str, status: str, duration: float) -> None:
        extra = {
            "thread_id": thread_id,
            "run_id": run_id,
            "run_status": status,
            "duration": round(duration, 2),
        }
        level = logging.INFO if status == "completed" else logging.WARNING
        self.logger.log(level, f"Assistant run finished: {status}", extra=extra)

    def ask_completed(self, thread_id: str, narrative_length: int, duration: float) -> None:
        self.logger.info(
            "Worker reply delivered",
            extra={
                "thread_id": thread_id,
                "narrative_length": narrative_length,
                "duration": round(duration, 2),
            },
        )

    def ask_failed(self, error: Exception) -> None:
        extra = {"error_type": type(error).__name__}
        terminal_state = getattr(error, "terminal_state", None)
        if terminal_state:
            extra["terminal_state"] = terminal_state
        self.logger.error(f"Worker request failed: {error}", extra=extra, exc_info=error)


# Global relay logger instance
relay_logger = RelayLogger()
