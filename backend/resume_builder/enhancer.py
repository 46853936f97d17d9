"""
Enhancement gateway: sends a résumé to an OpenAI-compatible chat completion
endpoint and returns the model's rewrite as a validated ResumeDocument.

The gateway holds no document state. Callers get either a document with the
same shape as the one they sent or an EnhancementError subclass.
"""
import os
import asyncio
import logging
from typing import Optional

import httpx

from .config import EnhancerConfig, get_enhancer_config
from .errors import (
    ConfigurationError, UpstreamTimeoutError, UpstreamError, UpstreamFormatError,
)
from .parsing import parse_enhanced_document
from .prompts import build_messages
from .schemas import ResumeDocument

logger = logging.getLogger(__name__)


class ResumeEnhancer:
    """Core AI service for résumé wording enhancement"""

    def __init__(self, config: Optional[EnhancerConfig] = None, api_key: Optional[str] = None):
        self._config = config
        self._api_key = api_key

    @property
    def config(self) -> EnhancerConfig:
        # resolved on first use; bad settings raise ConfigurationError from enhance()
        if self._config is None:
            self._config = get_enhancer_config()
        return self._config

    @property
    def api_key(self) -> Optional[str]:
        # Read at call time so a rotated or late-set env var is picked up
        return self._api_key or os.getenv(self.config.api_key_env)

    async def enhance(self, doc: ResumeDocument) -> ResumeDocument:
        try:
            api_key = self.api_key
        except ConfigurationError as e:
            logger.error(f"Enhancement refused: {e.message}")
            raise
        if not api_key:
            logger.error(f"Enhancement refused: {self.config.api_key_env} not configured")
            raise ConfigurationError(f"{self.config.api_key_env} not configured")

        logger.info(
            f"Sending resume to {self.config.model}: "
            f"{len(doc.experience)} experience, {len(doc.education)} education, "
            f"{len(doc.extraCurriculars)} activities, {len(doc.skills)} skills"
        )
        content = await self._call_llm(doc, api_key)
        enhanced = parse_enhanced_document(content)
        logger.info(
            f"Enhancement succeeded: {len(enhanced.experience)} experience, "
            f"{len(enhanced.education)} education, {len(enhanced.skills)} skills"
        )
        return enhanced

    async def _call_llm(self, doc: ResumeDocument, api_key: str) -> str:
        """POST the chat completion and return the assistant message text."""
        headers = {"Content-Type": "application/json", "Authorization": f"Bearer {api_key}"}
        payload = {
            "model": self.config.model,
            "messages": build_messages(doc, self.config.system_prompt),
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
            "top_p": self.config.top_p,
        }
        url = f"{self.config.base_url.rstrip('/')}/chat/completions"

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                # wait_for cancels the request task once the overall budget is spent
                response = await asyncio.wait_for(
                    client.post(url, headers=headers, json=payload),
                    timeout=self.config.timeout,
                )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.error(f"Enhancement timed out after {self.config.timeout}s")
            raise UpstreamTimeoutError(f"Request to {self.config.provider} timed out after {self.config.timeout:g}s")
        except httpx.RequestError as e:
            logger.error(f"Enhancement request failed: {e}")
            raise UpstreamError(f"Could not reach {self.config.provider}: {e}")

        if response.status_code < 200 or response.status_code >= 300:
            message = _error_message(response)
            logger.error(f"API call failed: {response.status_code} {message}")
            raise UpstreamError(message, status=response.status_code, details=response.text)

        try:
            result = response.json()
        except ValueError:
            logger.error(f"Invalid JSON envelope from API: {response.text[:200]}")
            raise UpstreamFormatError("Invalid JSON response from API", details=response.text)

        try:
            content = result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not isinstance(content, str) or not content.strip():
            logger.error(f"Invalid response format from API: {response.text[:200]}")
            raise UpstreamFormatError("Invalid response format from API", details=response.text)
        return content


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"API error: {response.status_code} - {response.text}"
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return err["message"]
        if isinstance(err, str) and err:
            return err
    return f"API error: {response.status_code}"


def get_enhancer() -> ResumeEnhancer:
    """FastAPI dependency; tests override it with a fake."""
    return ResumeEnhancer()
