"""
Runtime configuration for the résumé builder backend.

Provider presets cover the OpenAI-compatible endpoints we talk to; every
value can be overridden through the environment (or a .env file).
"""
from dotenv import load_dotenv
load_dotenv()          # must run before the os.getenv calls below
import os
import logging
from typing import List, Optional
from pydantic import BaseModel

from .errors import ConfigurationError
from .prompts import SYSTEM_PROMPT

PROVIDERS = {
    "deepseek": {
        "base_url": "https://api.deepseek.com/v1",
        "model": "deepseek-chat",
        "api_key_env": "DEEPSEEK_API_KEY",
    },
    "openai": {
        "base_url": "https://api.openai.com/v1",
        "model": "gpt-4o-mini",
        "api_key_env": "OPENAI_API_KEY",
    },
}


class EnhancerConfig(BaseModel):
    provider: str = "deepseek"
    base_url: str
    model: str
    api_key_env: str
    system_prompt: str = SYSTEM_PROMPT
    timeout: float = 60.0
    temperature: float = 0.3
    max_tokens: int = 4000
    top_p: float = 0.95


def get_enhancer_config(provider: Optional[str] = None) -> EnhancerConfig:
    """Build the enhancer config from the provider preset plus env overrides."""
    provider = (provider or os.getenv("ENHANCER_PROVIDER", "deepseek")).lower()
    if provider not in PROVIDERS:
        raise ConfigurationError(f"Unsupported enhancer provider: {provider}")
    raw_timeout = os.getenv("ENHANCER_TIMEOUT", "60")
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(f"ENHANCER_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
    if timeout <= 0:
        raise ConfigurationError(f"ENHANCER_TIMEOUT must be positive, got {raw_timeout!r}")
    preset = PROVIDERS[provider]
    return EnhancerConfig(
        provider=provider,
        base_url=os.getenv("ENHANCER_BASE_URL") or preset["base_url"],
        model=os.getenv("ENHANCER_MODEL") or preset["model"],
        api_key_env=preset["api_key_env"],
        system_prompt=os.getenv("ENHANCER_SYSTEM_PROMPT") or SYSTEM_PROMPT,
        timeout=timeout,
    )


def get_cors_origins() -> List[str]:
    origins_env = os.getenv("CORS_ORIGINS")
    origins = [o.strip() for o in (origins_env or "").split(",") if o.strip()]
    if not origins:
        # Local dev defaults (Next.js 3000, Vite 5173)
        origins = ["http://localhost:3000", "http://localhost:5173"]
    return origins


def get_log_level() -> str:
    """LOG_LEVEL from the environment; unknown names fall back to INFO."""
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level
