"""
Per-vendor wire formats.

Each vendor gets three small functions:
- headers(api_key)                  -> auth headers
- body(model, system, messages)     -> JSON request body
- text(data)                        -> reply text, or None if the path is missing

The request shapes are contracts with the vendors, keep them bit-exact.
"""

from typing import Any, Callable, Dict, List, NamedTuple, Optional

from edify.core import config
from edify.schemas.chat import ChatMessage, Role
from edify.schemas.provider import ProviderProfile

NO_RESPONSE = "No response received"


def _dig(data: Any, *path: Any) -> Any:
    cur = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(cur, list) or len(cur) <= key:
                return None
        elif not isinstance(cur, dict) or key not in cur:
            return None
        cur = cur[key]
    return cur


# ---- OpenAI: /chat/completions ----

def _openai_headers(api_key: str) -> Dict[str, str]:
    return {"Content-Type": "application/json", "Authorization": f"Bearer {api_key}"}


def _openai_body(model: str, system: str, messages: List[ChatMessage]) -> Dict[str, Any]:
    return {
        "model": model,
        "messages": [{"role": "system", "content": system}] + [m.to_wire() for m in messages],
        "max_tokens": config.MAX_TOKENS,
        "temperature": config.TEMPERATURE,
    }


def _openai_text(data: Any) -> Any:
    return _dig(data, "choices", 0, "message", "content")


# ---- Anthropic: /messages (system is a top-level field, no Authorization header) ----

def _anthropic_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "x-api-key": api_key,
        "anthropic-version": config.ANTHROPIC_VERSION,
    }


def _anthropic_body(model: str, system: str, messages: List[ChatMessage]) -> Dict[str, Any]:
    return {
        "model": model,
        "max_tokens": config.MAX_TOKENS,
        "system": system,
        "messages": [
            {"role": "assistant" if m.role == Role.ASSISTANT else "user", "content": m.content}
            for m in messages
        ],
    }


def _anthropic_text(data: Any) -> Any:
    return _dig(data, "content", 0, "text")


# ---- Google: :generateContent (assistant is called "model") ----

def _google_headers(api_key: str) -> Dict[str, str]:
    return {"Content-Type": "application/json", "Authorization": f"Bearer {api_key}"}


def _google_body(model: str, system: str, messages: List[ChatMessage]) -> Dict[str, Any]:
    # model travels in the URL, not the body
    contents: List[Dict[str, Any]] = [{"parts": [{"text": system}]}]
    for m in messages:
        contents.append({
            "parts": [{"text": m.content}],
            "role": "model" if m.role == Role.ASSISTANT else "user",
        })
    return {
        "contents": contents,
        "generationConfig": {
            "maxOutputTokens": config.MAX_TOKENS,
            "temperature": config.TEMPERATURE,
        },
    }


def _google_text(data: Any) -> Any:
    return _dig(data, "candidates", 0, "content", "parts", 0, "text")


class Wire(NamedTuple):
    headers: Callable[[str], Dict[str, str]]
    body: Callable[[str, str, List[ChatMessage]], Dict[str, Any]]
    text: Callable[[Any], Any]


WIRES: Dict[str, Wire] = {
    "openai": Wire(_openai_headers, _openai_body, _openai_text),
    "anthropic": Wire(_anthropic_headers, _anthropic_body, _anthropic_text),
    "google": Wire(_google_headers, _google_body, _google_text),
}


def get_wire(profile: ProviderProfile) -> Wire:
    return WIRES[profile.id]


def endpoint(profile: ProviderProfile, model: Optional[str] = None) -> str:
    if profile.id == "google" and model and model != profile.model:
        return profile.base_url.replace(f"/models/{profile.model}:", f"/models/{model}:")
    return profile.base_url


def build_headers(profile: ProviderProfile, api_key: str) -> Dict[str, str]:
    return get_wire(profile).headers(api_key)


def build_body(
    profile: ProviderProfile,
    messages: List[ChatMessage],
    system: str,
    model: Optional[str] = None,
) -> Dict[str, Any]:
    # system-role messages never go in the history; the instruction is injected per vendor
    history = [m for m in messages if m.role != Role.SYSTEM]
    return get_wire(profile).body(model or profile.model, system, history)


def extract_text(profile: ProviderProfile, data: Any) -> str:
    text = get_wire(profile).text(data)
    if isinstance(text, str) and text:
        return text
    return NO_RESPONSE
