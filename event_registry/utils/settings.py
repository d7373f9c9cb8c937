"""Runtime settings loaded from environment variables and an optional .env file."""
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

_ENV_KEYS = {"REGISTRY_ORGANIZER_ID", "ORGANIZER_PASSWORD", "REGISTRY_DATA_FILE", "LOG_LEVEL"}

_ENV_LOADED = False
_ENV_LOCK = Lock()


def _load_env(env_path: Path = Path(".env")) -> None:
    """Load registry settings from .env file if present."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        if env_path.exists():
            for raw_line in env_path.read_text(encoding="utf-8").splitlines():
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"\'')

                # Real environment variables win over .env entries
                if key in _ENV_KEYS and key not in os.environ:
                    os.environ[key] = value

        _ENV_LOADED = True


@dataclass
class RegistrySettings:
    """Registry deployment settings."""

    organizer_id: str
    organizer_password: str
    data_file: str
    log_level: str


def get_settings() -> RegistrySettings:
    """
    Read current settings.

    Returns:
        RegistrySettings built from the environment

    Behavior:
        - Loads .env once per process
        - Empty ORGANIZER_PASSWORD disables organizer sign-in
        - Empty REGISTRY_DATA_FILE disables persistence
    """
    _load_env()

    return RegistrySettings(
        organizer_id=os.getenv("REGISTRY_ORGANIZER_ID", "organizer"),
        organizer_password=os.getenv("ORGANIZER_PASSWORD", ""),
        data_file=os.getenv("REGISTRY_DATA_FILE", "data/registry.json"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
