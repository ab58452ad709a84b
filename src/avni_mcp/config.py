"""Configuration for the Avni MCP server.

Loads settings from environment variables (via a .env file or the system
environment). Every value has a default so the package can be imported in
CI without credentials.

The API key is not validated here. An empty key is sent as-is and the Avni
server rejects the first request.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Optional .env at the project root; CI and containers use the real environment.
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)

# --- Avni connection ---
# Known Avni deployments. AVNI_ENVIRONMENT picks one of these when
# AVNI_BASE_URL is not set explicitly.
AVNI_STAGING_URL = "https://staging.avniproject.org"
AVNI_PRODUCTION_URL = "https://app.avniproject.org"

AVNI_ENVIRONMENT: str = os.getenv("AVNI_ENVIRONMENT", "staging").lower()

_ENVIRONMENT_URLS = {
    "staging": AVNI_STAGING_URL,
    "production": AVNI_PRODUCTION_URL,
}

AVNI_BASE_URL: str = os.getenv(
    "AVNI_BASE_URL",
    _ENVIRONMENT_URLS.get(AVNI_ENVIRONMENT, AVNI_STAGING_URL),
)

# Sent in the "auth-token" header of every request.
AVNI_API_KEY: str = os.getenv("AVNI_API_KEY", "")

# --- Logging ---
# The MCP server writes logs to stderr at this level.
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
