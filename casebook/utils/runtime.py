"""Runtime settings read from the environment.

Dev mode, role bootstrap lists and tunables all come from environment
variables; this module is the single place that parses them.
"""

import os
from urllib.parse import urlparse
from typing import List, Optional, Set

_LOCAL_HOSTS: Set[str] = {"localhost", "127.0.0.1", "::1"}

DEV_USER_EMAIL = "dev@localhost"
DEV_USER_NAME = "Development User"

DEFAULT_CASE_NUMBER_MAX_ATTEMPTS = 5
DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8000",
]


def _extract_hostname(url_value: str) -> Optional[str]:
    """Return hostname from a URL or bare host string."""
    if not url_value:
        return None
    url_value = url_value.strip()
    if not url_value:
        return None
    candidate = url_value if "://" in url_value else f"http://{url_value}"
    return urlparse(candidate).hostname


def env_list(var_name: str) -> Set[str]:
    """Parse a comma-separated env var into a lower-cased set, ignoring quotes."""
    raw = os.getenv(var_name, "")
    values = set()
    for entry in raw.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            values.add(cleaned.lower())
    return values


def _allowed_dev_hosts() -> Set[str]:
    allowed = set(_LOCAL_HOSTS)
    allowed.update(env_list("DEV_MODE_ALLOWED_HOSTS"))
    return allowed


def dev_mode_requested() -> bool:
    """Return True when DEV_MODE env var is set to a truthy value."""
    return os.getenv("DEV_MODE", "false").lower() == "true"


def dev_mode_active() -> bool:
    """Return True if dev mode is enabled and allowed; raise if misconfigured.

    DEV_MODE impersonates a fixed local user, so it is only honoured when
    APP_BASE_URL points at a local (or explicitly whitelisted) host.
    """
    if not dev_mode_requested():
        return False

    hostname = _extract_hostname(os.getenv("APP_BASE_URL", ""))
    allowed_hosts = _allowed_dev_hosts()

    if hostname:
        if hostname.lower() not in allowed_hosts:
            raise RuntimeError(
                "DEV_MODE=true is not permitted when APP_BASE_URL points to "
                f"'{hostname}'. Allowed hosts: {sorted(allowed_hosts)}"
            )
    elif os.getenv("ALLOW_DEV_MODE", "false").lower() != "true" and not os.getenv("PYTEST_CURRENT_TEST"):
        raise RuntimeError(
            "DEV_MODE=true requires APP_BASE_URL to be set to a localhost URL "
            "or ALLOW_DEV_MODE=true for non-local execution."
        )

    return True


def case_number_max_attempts() -> int:
    """Number of candidates drawn before case-number generation gives up."""
    raw = os.getenv("CASE_NUMBER_MAX_ATTEMPTS")
    if not raw:
        return DEFAULT_CASE_NUMBER_MAX_ATTEMPTS
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_CASE_NUMBER_MAX_ATTEMPTS
    return value if value > 0 else DEFAULT_CASE_NUMBER_MAX_ATTEMPTS


def cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)
