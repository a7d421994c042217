import pytest

VENDOR_ENV_VARS = [
    "GROQ_API_KEY", "GROQ_MODEL", "GROQ_BASE_URL",
    "OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL",
    "NUMBER_AI_TIMEOUT_S",
]


class FakeProvider:
    model = "fake-model"

    def __init__(self, response_text=None, exc=None):
        self._response_text = response_text
        self._exc = exc
        self.calls = []

    def generate(self, *, system: str, user: str, model: str | None = None):
        self.calls.append({"system": system, "user": user, "model": model})
        if self._exc is not None:
            raise self._exc
        return self._response_text


@pytest.fixture(autouse=True)
def clean_vendor_env(monkeypatch):
    for name in VENDOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_provider_factory():
    def _make(response_text=None, exc=None):
        return FakeProvider(response_text, exc=exc)
    return _make
