# siteinspect/config.py

from __future__ import annotations

import os

FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "10"))
FETCH_USER_AGENT = os.getenv(
    "FETCH_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
)

# Comma separated; "*" allows any origin (the UI is usually served from file:// or localhost)
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]

MAX_QR_IMAGE_BYTES = int(os.getenv("MAX_QR_IMAGE_BYTES", str(5 * 1024 * 1024)))
QR_MAX_DIMENSION = int(os.getenv("QR_MAX_DIMENSION", "1600"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SENTRY_DSN = os.getenv("SENTRY_DSN", "")
