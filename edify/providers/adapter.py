# sends one async POST with httpx to the selected vendor and normalizes the outcome:
# success -> reply text, failure -> ClassifiedError (never a raw httpx error)
# no retries here, retry policy belongs to the caller

import logging
from typing import Any, List, Optional

import httpx

from edify.core import config
from edify.core.errors import ClassifiedError, classify_error, connection_failed
from edify.providers import wire
from edify.providers.profiles import get_profile
from edify.schemas.chat import ChatMessage
from edify.schemas.provider import AIConfig, ProviderProfile
from edify.services.prompt import build_system_instruction

logger = logging.getLogger(__name__)

_UNPARSABLE_ERROR_BODY = {"error": {"message": "Failed to parse error response"}}


def _timeout() -> httpx.Timeout:
    return httpx.Timeout(config.REQUEST_TIMEOUT, connect=config.CONNECT_TIMEOUT)


def _error_body(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        return _UNPARSABLE_ERROR_BODY


class ProviderAdapter:
    def __init__(self, api_key: str, provider: str = "openai", *, model: Optional[str] = None) -> None:
        self.api_key = api_key
        self.profile: ProviderProfile = get_profile(provider)
        self.model = model or self.profile.model

    @classmethod
    def from_config(cls, cfg: AIConfig) -> "ProviderAdapter":
        return cls(cfg.api_key or "", cfg.provider, model=cfg.model)

    @property
    def url(self) -> str:
        return wire.endpoint(self.profile, self.model)

    def build_request(self, messages: List[ChatMessage], grounding: Optional[str] = None) -> dict:
        system = build_system_instruction(grounding)
        return wire.build_body(self.profile, messages, system, self.model)

    async def chat(self, messages: List[ChatMessage], grounding: Optional[str] = None) -> str:
        payload = self.build_request(messages, grounding)
        headers = wire.build_headers(self.profile, self.api_key)
        logger.info("chat request to %s (%d messages)", self.profile.name, len(messages))
        try:
            async with httpx.AsyncClient(timeout=_timeout()) as client:
                r = await client.post(self.url, json=payload, headers=headers)
                if not r.is_success:
                    err = classify_error(r.status_code, _error_body(r))
                    logger.warning(
                        "%s returned %d (%s): %s", self.profile.name, r.status_code, err.kind.value, err.message
                    )
                    raise err
                data = r.json()
        except ClassifiedError:
            raise
        except (httpx.HTTPError, ValueError) as e:
            # transport failure or a success body that isn't JSON
            logger.warning("%s request failed: %s", self.profile.name, e)
            raise connection_failed() from e
        return wire.extract_text(self.profile, data)

    async def check_connection(self) -> bool:
        """GET the vendor's listing endpoint with our credentials; True on 2xx."""
        url = self.profile.check_url or self.profile.base_url
        headers = wire.build_headers(self.profile, self.api_key)
        try:
            async with httpx.AsyncClient(timeout=_timeout()) as client:
                r = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.info("connection check against %s failed: %s", self.profile.name, e)
            return False
        return r.is_success
