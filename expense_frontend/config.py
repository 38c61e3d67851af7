# expense_frontend/config.py

import os
import logging

# ---------------- API base ----------------
DEFAULT_API_URL = "http://localhost:3001"

API_BASE = os.environ.get("EXPENSE_API_URL", DEFAULT_API_URL).rstrip("/")
REQUEST_TIMEOUT = float(os.environ.get("EXPENSE_API_TIMEOUT", "10"))
LOG_LEVEL = os.environ.get("EXPENSE_LOG_LEVEL", "INFO").upper()

APP_TITLE = "Gerenciador de Despesas"


def setup_logging(level=None):
    """Configure the diagnostic channel for the whole app"""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return logging.getLogger("expense-frontend")
