"""Process entry point for the worker relay."""

import logging
import sys

import uvicorn
from dotenv import find_dotenv, load_dotenv

from .api.config import load_settings
from .api.errors import ConfigurationError
from .api.logging import configure_logging
from .api.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    """Load settings, then serve until the host stops the process.

    Exits with status 1, before binding the port, when OPENAI_API_KEY or
    WORKER_ASSISTANT_ID is missing or any setting is invalid.
    """
    # Load .env from project root; real environment variables take precedence
    load_dotenv(find_dotenv(usecwd=True))

    try:
        settings = load_settings()
    except ConfigurationError as e:
        configure_logging(json_format=False)
        logger.error(str(e))
        sys.exit(1)

    configure_logging(json_format=settings.log_json, level=settings.log_level)
    app = create_app(settings)

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
