from typing import Dict, List, Any, Optional
from dataclasses import dataclass
import asyncio
import logging
from openai import AsyncOpenAI
import os

logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# Configuration – provider-agnostic LLM wiring
# ---------------------------------------------------------
# Every provider is reached through an OpenAI-compatible HTTP API. Local
# runtimes (Ollama, LMStudio) ignore the API key; hosted providers read theirs
# from the environment.
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://127.0.0.1:11434/v1")
LMSTUDIO_BASE_URL = os.getenv("LMSTUDIO_BASE_URL", "http://127.0.0.1:1234/v1")
GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")

# Default model names per-provider
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "gpt-oss:20b")
LMSTUDIO_MODEL = os.getenv("LMSTUDIO_MODEL", "openai/gpt-oss-20b")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

# Dummy API key for OpenAI-compatible local runtimes
DUMMY_API_KEY = os.getenv("DUMMY_API_KEY", "sk-no-key")

# allowed values: "ollama", "lmstudio", "gemini" or "openai"
DEFAULT_PROVIDER = os.getenv("LLM_PROVIDER", "ollama")

_PROVIDERS: Dict[str, Dict[str, str]] = {
    "ollama": {"base_url": OLLAMA_BASE_URL, "model": OLLAMA_MODEL, "key_env": "DUMMY_API_KEY"},
    "lmstudio": {"base_url": LMSTUDIO_BASE_URL, "model": LMSTUDIO_MODEL, "key_env": "DUMMY_API_KEY"},
    "gemini": {"base_url": GEMINI_BASE_URL, "model": GEMINI_MODEL, "key_env": "GEMINI_API_KEY"},
    "openai": {"base_url": OPENAI_BASE_URL, "model": OPENAI_MODEL, "key_env": "OPENAI_API_KEY"},
}


@dataclass(frozen=True)
class LLMSettings:
    provider: str
    base_url: str
    model: str
    api_key: str
    temperature: float = 0.2
    max_tokens: int = 8192


def available_providers() -> List[str]:
    return list(_PROVIDERS.keys())


def settings_from_env(provider: Optional[str] = None) -> LLMSettings:
    """Build LLM settings for ``provider`` (defaults to LLM_PROVIDER)."""
    name = (provider or DEFAULT_PROVIDER or "ollama").lower()
    if name not in _PROVIDERS:
        raise ValueError(f"Unknown LLM provider {name!r}; expected one of {available_providers()}")
    entry = _PROVIDERS[name]
    return LLMSettings(
        provider=name,
        base_url=entry["base_url"],
        model=os.getenv("LLM_MODEL", entry["model"]),
        api_key=os.getenv(entry["key_env"], DUMMY_API_KEY),
        temperature=float(os.getenv("LLM_TEMPERATURE", "0.2")),
        max_tokens=int(os.getenv("LLM_MAX_TOKENS", "8192")),
    )


def create_client(settings: LLMSettings) -> AsyncOpenAI:
    """Create an AsyncOpenAI client for the configured provider.

    SDK-level retries are disabled: one extraction issues exactly one request.
    """
    return AsyncOpenAI(base_url=settings.base_url, api_key=settings.api_key, max_retries=0)


def _message_text(resp: Any) -> str:
    msg = resp.choices[0].message
    content = getattr(msg, "content", None)
    if content is None and isinstance(msg, dict):
        content = msg.get("content")
    return (content or "").strip()


async def acomplete(
    prompt: str,
    *,
    system: str = "",
    settings: Optional[LLMSettings] = None,
    client: Optional[AsyncOpenAI] = None,
) -> str:
    """Single non-streaming completion; returns the assistant message text.

    Errors from the provider propagate to the caller.
    """
    settings = settings or settings_from_env()
    owns_client = client is None
    if client is None:
        client = create_client(settings)
    messages: List[Dict[str, Any]] = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})

    logger.debug(f"Requesting completion from {settings.provider}:{settings.model} ({len(prompt)} prompt chars)")
    try:
        resp = await client.chat.completions.create(
            model=settings.model,
            messages=messages,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            stream=False,
        )
        return _message_text(resp)
    finally:
        if owns_client:
            await client.close()


def _can_call_llm_sync() -> bool:
    try:
        loop = asyncio.get_running_loop()
        if loop and loop.is_running():
            return False
    except RuntimeError:
        # No running loop
        return True
    return True


def complete(prompt: str, *, system: str = "", settings: Optional[LLMSettings] = None) -> str:
    """Blocking wrapper around :func:`acomplete`.

    Must not be called from a thread that is running an event loop; async
    callers should run the scraper via ``asyncio.to_thread`` or await
    :func:`acomplete` directly.
    """
    if not _can_call_llm_sync():
        raise RuntimeError("complete() called from a running event loop; use acomplete() instead")
    return asyncio.run(acomplete(prompt, system=system, settings=settings))
