# the three supported vendors
# unknown ids fall back to the first entry (openai)

import logging
from typing import Dict

from edify.schemas.provider import ProviderProfile

logger = logging.getLogger(__name__)

PROVIDERS: Dict[str, ProviderProfile] = {
    "openai": ProviderProfile(
        id="openai",
        name="OpenAI",
        base_url="https://api.openai.com/v1/chat/completions",
        model="gpt-3.5-turbo",
        description="GPT-4, GPT-3.5 Turbo",
        website="https://platform.openai.com",
        check_url="https://api.openai.com/v1/models",
    ),
    "anthropic": ProviderProfile(
        id="anthropic",
        name="Anthropic",
        base_url="https://api.anthropic.com/v1/messages",
        model="claude-3-sonnet-20240229",
        description="Claude AI models",
        website="https://console.anthropic.com",
        check_url="https://api.anthropic.com/v1/models",
    ),
    "google": ProviderProfile(
        id="google",
        name="Google",
        base_url="https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent",
        model="gemini-pro",
        description="Gemini models",
        website="https://ai.google.dev",
        check_url="https://generativelanguage.googleapis.com/v1beta/models",
    ),
}

DEFAULT_PROVIDER_ID = "openai"


def get_profile(provider_id: str) -> ProviderProfile:
    profile = PROVIDERS.get(provider_id)
    if profile is None:
        logger.warning("unknown provider %r, falling back to %s", provider_id, DEFAULT_PROVIDER_ID)
        return PROVIDERS[DEFAULT_PROVIDER_ID]
    return profile


def list_profiles() -> list[ProviderProfile]:
    return list(PROVIDERS.values())
