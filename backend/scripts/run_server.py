#!/usr/bin/env python3
"""Run the ProfileHub API with uvicorn."""
from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from uvicorn import run

from profilehub.core.config import get_settings
from profilehub.core.logging_config import setup_logging


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_level)
    port = int(sys.argv[1]) if len(sys.argv) > 1 else settings.port
    run("profilehub.main:app", host=settings.host, port=port, log_config=None)
