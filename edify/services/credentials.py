# key-value persistence for the api key + provider choice
# two backends: a per-session dict, and a .env file managed with python-dotenv

from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from dotenv import get_key, set_key, unset_key

from edify.core import config
from edify.schemas.provider import AIConfig


class CredentialStore(Protocol):
    def get(self, name: str) -> Optional[str]: ...
    def set(self, name: str, value: str) -> None: ...
    def delete(self, name: str) -> None: ...


class InMemoryCredentialStore:
    """Session-scoped store, forgotten when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def delete(self, name: str) -> None:
        self._values.pop(name, None)


class DotenvCredentialStore:
    """Device-scoped store backed by a .env file (created on first write)."""

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        self.path = Path(path or config.CREDENTIALS_FILE)

    def get(self, name: str) -> Optional[str]:
        if not self.path.exists():
            return None
        return get_key(self.path, name)

    def set(self, name: str, value: str) -> None:
        self.path.touch(exist_ok=True)
        set_key(self.path, name, value)

    def delete(self, name: str) -> None:
        if self.path.exists() and get_key(self.path, name) is not None:
            unset_key(self.path, name)


def load_ai_config(store: CredentialStore) -> AIConfig:
    api_key = store.get(config.API_KEY_NAME) or None
    provider = store.get(config.PROVIDER_KEY_NAME) or config.DEFAULT_PROVIDER
    return AIConfig(api_key=api_key, provider=provider)


def save_ai_config(store: CredentialStore, api_key: Optional[str], provider: str) -> AIConfig:
    key = (api_key or "").strip()
    # an empty key means "forget it"
    if key:
        store.set(config.API_KEY_NAME, key)
    else:
        store.delete(config.API_KEY_NAME)
    store.set(config.PROVIDER_KEY_NAME, provider)
    return AIConfig(api_key=key or None, provider=provider)
