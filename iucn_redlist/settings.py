"""Application settings and API key lookup.

The key is looked up on every request, in this order: explicit argument,
``IUCN_REDLIST_KEY`` environment variable, persisted config file.
"""

import os
import webbrowser
from pathlib import Path

from dotenv import set_key
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import MissingCredentialError

KEY_ENV_VAR = "IUCN_REDLIST_KEY"
CONFIG_ENV_VAR = "IUCN_REDLIST_CONFIG"
DEFAULT_CONFIG_FILE = Path.home() / ".config/iucn-redlist/config.env"
SIGNUP_URL = "https://api.iucnredlist.org/users/sign_up"


class Settings(BaseSettings):
    """Settings for the Red List client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    iucn_redlist_key: str | None = None


def config_file() -> Path:
    """Path of the persisted config file."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_FILE


def get_settings() -> Settings:
    """Load settings fresh from the environment and config files.

    Not cached: a key saved or exported mid-session is picked up on the
    next request.
    """
    return Settings(_env_file=(config_file(), ".env"))


def resolve_key(key: str | None = None) -> str:
    """Return the API key to send, or raise MissingCredentialError."""
    if key:
        return key
    env_key = os.environ.get(KEY_ENV_VAR, "")
    if env_key:
        return env_key
    stored = get_settings().iucn_redlist_key
    if stored:
        return stored
    raise MissingCredentialError("need an API key for Red List data")


def save_key(key: str, path: Path | None = None) -> Path:
    """Persist an API key to the config file and return its path."""
    if not key:
        raise MissingCredentialError("refusing to save an empty API key")
    path = Path(path) if path else config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(mode=0o600, exist_ok=True)
    set_key(str(path), KEY_ENV_VAR, key, quote_mode="never")
    return path


def use_iucn() -> str:
    """Open the API key sign-up page in a browser."""
    webbrowser.open(SIGNUP_URL)
    return SIGNUP_URL
