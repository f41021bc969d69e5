"""Settings for the audit tool, read from the environment (and .env)."""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_ENDPOINT = "http://localhost:3001/api/audit"
DEFAULT_LINK_FRAGMENT = "maps.app.goo.gl"


@dataclass(frozen=True)
class Settings:
    endpoint: str = DEFAULT_ENDPOINT
    link_fragment: str = DEFAULT_LINK_FRAGMENT
    timeout: float = 30.0  # seconds, handed to httpx as-is
    host: str = "127.0.0.1"
    port: int = 8000


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default).strip()
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from None


def load_settings() -> Settings:
    """
    Build Settings from GBP_AUDIT_* environment variables.

    Loads .env from the working directory first; real environment variables win.
    """
    load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        endpoint=os.getenv("GBP_AUDIT_ENDPOINT", DEFAULT_ENDPOINT).strip() or DEFAULT_ENDPOINT,
        link_fragment=(
            os.getenv("GBP_AUDIT_LINK_FRAGMENT", DEFAULT_LINK_FRAGMENT).strip()
            or DEFAULT_LINK_FRAGMENT
        ),
        timeout=_env_number("GBP_AUDIT_TIMEOUT", "30", float),
        host=os.getenv("GBP_AUDIT_HOST", "127.0.0.1").strip() or "127.0.0.1",
        port=_env_number("GBP_AUDIT_PORT", "8000", int),
    )
