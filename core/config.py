"""Runtime configuration read from environment variables.

Values are resolved once at import time. Defaults are suitable for local
development.
"""

import os

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

LOG_DIR = os.getenv("LOG_DIR", os.path.join(BASE_DIR, "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated list, "*" allows any origin.
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

SUGGESTION_COUNT = int(os.getenv("SUGGESTION_COUNT", "3"))
