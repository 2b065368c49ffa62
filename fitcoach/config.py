"""Runtime settings read from environment variables.

The API entry point calls ``load_dotenv()`` first, so a local ``.env`` file
works the same as real environment variables. See ``.env.example``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MODEL = "meta-llama/llama-3.2-3b-instruct"
DEFAULT_STORE_PATH = Path.home() / ".fitcoach" / "workouts.json"


@dataclass(frozen=True)
class Settings:
    api_key: str
    model: str
    temperature: float
    max_tokens: int
    request_timeout: float
    store_path: Path
    frontend_url: str = ""


def _env_number(name: str, default: str, cast: type) -> int | float:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def get_settings() -> Settings:
    """Build settings from the current environment."""
    store_path = os.getenv("FITCOACH_STORE_PATH")
    return Settings(
        api_key=os.getenv("DEDALUS_API_KEY", "").strip(),
        model=os.getenv("DEDALUS_MODEL", DEFAULT_MODEL).strip(),
        temperature=_env_number("FITCOACH_TEMPERATURE", "0.4", float),
        max_tokens=_env_number("FITCOACH_MAX_TOKENS", "2500", int),
        request_timeout=_env_number("FITCOACH_REQUEST_TIMEOUT", "60", float),
        store_path=Path(store_path).expanduser() if store_path else DEFAULT_STORE_PATH,
        frontend_url=os.getenv("FRONTEND_URL", ""),
    )
