#!/usr/bin/env python3
"""Run the booking API with uvicorn, using TLS when a certificate is configured."""
from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from uvicorn import run

from app.core.config import get_settings


if __name__ == "__main__":
    settings = get_settings()
    port = int(sys.argv[1]) if len(sys.argv) > 1 else settings.port
    ssl_options = {}
    if settings.ssl_cert_file and settings.ssl_key_file:
        ssl_options = {"ssl_certfile": settings.ssl_cert_file, "ssl_keyfile": settings.ssl_key_file}
    run("app.main:app", host=settings.host, port=port, log_level=settings.log_level, **ssl_options)
