import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from llm.providers.base import LLMProvider

logger = logging.getLogger(__name__)

NO_RESPONSE_ERROR = "No response from AI. Maybe some error occurred."
PROVIDER_FAILED_ERROR = "Request to AI provider failed."


@dataclass(frozen=True)
class Reply:
    """Outcome of one completion: either a decoded payload or an error message.

    ``document`` keeps the whole decoded JSON for callers that need more
    than the expected field.
    """

    payload: Any = None
    error: Optional[str] = None
    document: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None


def interpret(raw_text: Optional[str], expected_field: str) -> Reply:
    """Decode a completion and pull out ``expected_field``.

    Models sometimes answer with a bare value instead of the wrapper object,
    so when the field is missing the whole decoded value becomes the payload.
    The payload is never coerced to another type.
    """
    if not raw_text:
        return Reply(error=NO_RESPONSE_ERROR)

    try:
        parsed = json.loads(raw_text)
    except ValueError:
        logger.warning(f"Completion is not valid JSON: {raw_text[:200]!r}")
        return Reply(error=NO_RESPONSE_ERROR)

    if parsed is None:
        return Reply(error=NO_RESPONSE_ERROR)

    if isinstance(parsed, dict) and parsed.get(expected_field) is not None:
        return Reply(payload=parsed[expected_field], document=parsed)
    return Reply(payload=parsed, document=parsed)


class LLMClient:
    """Runs one prompt pair through a provider and interprets the JSON reply.

    Provider calls are blocking HTTP requests, so they run in a worker thread
    and any number of ``ask`` calls can be awaited concurrently.
    """

    def __init__(self, provider: LLMProvider, model: Optional[str] = None):
        self.provider = provider
        self.model = model or getattr(provider, "model", None)

    async def complete(self, *, system: str, user: str) -> Reply:
        """Return the raw completion text as the payload of a Reply."""
        try:
            text = await asyncio.to_thread(
                self.provider.generate, system=system, user=user, model=self.model
            )
        except Exception as e:
            logger.error(f"LLM provider call failed: {e!r}")
            return Reply(error=str(e) or PROVIDER_FAILED_ERROR)
        return Reply(payload=text)

    async def ask(self, *, system: str, user: str, field: str) -> Reply:
        reply = await self.complete(system=system, user=user)
        if not reply.ok:
            return reply
        return interpret(reply.payload, field)
