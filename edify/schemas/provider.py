# provider descriptors and the caller-supplied credentials value

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from edify.core import config


class ProviderProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    base_url: str
    model: str
    description: str = ""
    website: str = ""
    check_url: Optional[str] = None


class AIConfig(BaseModel):
    """
    Credentials + provider selection handed to the orchestrator.
    Built by the caller (see services/credentials.py), never read from globals.
    """
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    provider: str = Field(default_factory=lambda: config.DEFAULT_PROVIDER)
    model: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())
