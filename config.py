"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Database ──────────────────────────────────────────────
# Provider name understood by db.providers.get_provider ("sqlite" or "postgres").
EMPLOYEES_DB_PROVIDER: str = os.getenv("EMPLOYEES_DB_PROVIDER", "sqlite")

# sqlite: a file path. postgres: a libpq DSN or postgresql:// URL.
EMPLOYEES_DB_URL: str = os.getenv("EMPLOYEES_DB_URL", "northwind.db")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
