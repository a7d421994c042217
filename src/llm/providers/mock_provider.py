from __future__ import annotations
import json
from typing import Optional
from llm.providers.base import LLMProvider

class MockProvider(LLMProvider):
    model = "mock"

    def generate(self, *, system: str, user: str, model: str | None = None) -> Optional[str]:
        """
        Returns dummy JSON responses based on the prompt content.
        """
        # Array keys first: "random_float" is a prefix of "random_float_array"
        if '"random_int_array"' in system:
            return json.dumps({"random_int_array": [4, 8, 15, 16, 23]})
        if '"random_float_array"' in system:
            return json.dumps({"random_float_array": [0.5, 1.25, 2.75]})
        if '"random_integer"' in system:
            return json.dumps({"random_integer": 42})
        if '"random_float"' in system:
            return json.dumps({"random_float": 3.14})

        if '"is_prime"' in system:
            return json.dumps({"is_prime": True})

        if '"description"' in system:
            return json.dumps({"description": "A number with many interesting properties."})

        if '"pattern"' in system:
            return json.dumps({"pattern": "Each term increases by a constant difference."})

        if '"sequence"' in system:
            return json.dumps({"sequence": [2, 4, 6, 8, 10]})

        if '"result"' in system:
            return json.dumps({"result": 0})

        if "unit conversion" in system.lower():
            return json.dumps({"value": 100, "from": "m", "to": "cm"})

        # Default fallback
        return "{}"
