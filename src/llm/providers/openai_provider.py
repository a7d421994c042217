from __future__ import annotations
import logging
import os
from typing import Optional

import httpx

from llm.schemas import ChatCompletion
from .base import ConfigurationError, LLMProvider

logger = logging.getLogger(__name__)


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


class OpenAIProvider(LLMProvider):
    """Chat-completions provider for any OpenAI-compatible endpoint."""

    name = "openai"
    env_prefix = "OPENAI"
    default_model = "gpt-4o-mini"
    default_base_url = "https://api.openai.com/v1"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout_s: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        p = self.env_prefix
        self.api_key = api_key or _env(f"{p}_API_KEY")
        self.model = model or _env(f"{p}_MODEL") or self.default_model
        self.base_url = (base_url or _env(f"{p}_BASE_URL") or self.default_base_url).rstrip("/")
        if timeout_s is None:
            try:
                timeout_s = float(_env("NUMBER_AI_TIMEOUT_S", "30"))
            except ValueError:
                raise ConfigurationError("NUMBER_AI_TIMEOUT_S must be a number") from None
        self.timeout_s = timeout_s
        self._transport = transport

        if not self.api_key:
            raise ConfigurationError(f"{p}_API_KEY is missing")

    def generate(self, *, system: str, user: str, model: str | None = None) -> Optional[str]:
        url = f"{self.base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": model or self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "response_format": {"type": "json_object"},
        }

        logger.debug(f"POST {url} (provider={self.name}, model={payload['model']})")
        with httpx.Client(timeout=self.timeout_s, transport=self._transport) as client:
            r = client.post(url, headers=headers, json=payload)
            r.raise_for_status()
            data = r.json()

        return ChatCompletion.model_validate(data).first_content()
