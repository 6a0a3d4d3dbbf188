#!/usr/bin/env python3
"""Run the worker relay HTTP server."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from relay.cli import main


if __name__ == "__main__":
    main()
