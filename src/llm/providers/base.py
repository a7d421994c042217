from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional


class ConfigurationError(RuntimeError):
    """Raised when a provider cannot be constructed (e.g. no API key)."""


class LLMProvider(ABC):
    model: str

    @abstractmethod
    def generate(self, *, system: str, user: str, model: str | None = None) -> Optional[str]:
        """
        Must return the model output as TEXT (we'll parse JSON in LLMClient),
        or None when the completion carries no usable content.
        """
        raise NotImplementedError
