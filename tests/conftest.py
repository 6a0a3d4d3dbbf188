"""Root pytest configuration."""

import os

# Unit tests must never pick up real credentials from the developer's shell
for _name in ("OPENAI_API_KEY", "WORKER_ASSISTANT_ID", "PORT", "HOST", "LOG_FORMAT", "LOG_LEVEL", "RUN_POLL_INTERVAL_MS"):
    os.environ.pop(_name, None)
