from __future__ import annotations
from .openai_provider import OpenAIProvider


class GroqProvider(OpenAIProvider):
    # Groq serves the OpenAI chat-completions API under /openai/v1
    name = "groq"
    env_prefix = "GROQ"
    default_model = "openai/gpt-oss-20b"
    default_base_url = "https://api.groq.com/openai/v1"
