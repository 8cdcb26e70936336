import json
from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from ecostay.api import deps
from ecostay.config.settings import Settings
from ecostay.core.exceptions import ChatProxyError, ConfigurationError
from ecostay.main import create_app
from ecostay.services.chat import ChatClient, GeminiTextGenerator

PROXY_URL = "http://localhost:5174/api/gemini"


class FakeGenerator:
    def __init__(self, reply="Try a rainwater tank.", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def client(generator):
    app = create_app()
    app.dependency_overrides[deps.get_text_generator] = lambda: generator
    with TestClient(app) as test_client:
        yield test_client


def test_proxy_returns_text(client, generator):
    response = client.post("/api/gemini", json={"prompt": "How do I save water?"})

    assert response.status_code == 200
    assert response.json() == {"text": "Try a rainwater tank."}
    assert generator.prompts == ["How do I save water?"]


@pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": None}, {"prompt": "   "}, {"prompt": 5}, ["hi"]])
def test_proxy_rejects_missing_prompt(client, generator, body):
    response = client.post("/api/gemini", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing prompt"}
    assert generator.prompts == []


@pytest.mark.parametrize(
    "content, headers",
    [
        (None, {}),
        (b"not json", {"Content-Type": "application/json"}),
        (b"", {"Content-Type": "application/json"}),
    ],
)
def test_proxy_rejects_unreadable_body(client, generator, content, headers):
    response = client.post("/api/gemini", content=content, headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing prompt"}
    assert generator.prompts == []


def test_proxy_reports_generation_failure(client, generator):
    generator.error = ChatProxyError("quota exceeded")

    response = client.post("/api/gemini", json={"prompt": "hi"})

    assert response.status_code == 500
    assert response.json() == {"error": "quota exceeded"}


def test_proxy_without_api_key():
    def unconfigured():
        raise ConfigurationError("Missing GEMINI_API_KEY")

    app = create_app()
    app.dependency_overrides[deps.get_text_generator] = unconfigured
    with TestClient(app) as test_client:
        response = test_client.post("/api/gemini", json={"prompt": "hi"})

    assert response.status_code == 500
    assert response.json() == {"error": "Missing GEMINI_API_KEY"}


def test_generator_from_settings_requires_key():
    with pytest.raises(ConfigurationError):
        GeminiTextGenerator.from_settings(Settings(_env_file=None, GEMINI_API_KEY=None))


def _fake_genai(reply=None, error=None):
    calls = []

    async def generate_content(model, contents):
        calls.append((model, contents))
        if error is not None:
            raise error
        return SimpleNamespace(text=reply)

    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))
    return client, calls


async def test_gemini_generator_passes_model_and_prompt():
    fake, calls = _fake_genai(reply="Compost!")
    generator = GeminiTextGenerator(api_key="k", model="gemini-2.5-flash", client=fake)

    assert await generator.generate("Ideas?") == "Compost!"
    assert calls == [("gemini-2.5-flash", "Ideas?")]


async def test_gemini_generator_empty_reply():
    fake, _ = _fake_genai(reply=None)

    assert await GeminiTextGenerator(api_key="k", client=fake).generate("Ideas?") == ""


async def test_gemini_generator_wraps_failures():
    fake, _ = _fake_genai(error=RuntimeError("upstream down"))

    with pytest.raises(ChatProxyError) as exc_info:
        await GeminiTextGenerator(api_key="k", client=fake).generate("Ideas?")

    assert exc_info.value.message == "upstream down"


def _chat_client(handler):
    return ChatClient(PROXY_URL, transport=httpx.MockTransport(handler))


async def test_chat_client_returns_text():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"text": "Plant native trees."})

    client = _chat_client(handler)

    assert await client.ask("Biodiversity tips?") == "Plant native trees."
    assert seen[0].method == "POST"
    assert json.loads(seen[0].read()) == {"prompt": "Biodiversity tips?"}
    await client.aclose()


async def test_chat_client_error_body_yields_no_text():
    client = _chat_client(lambda request: httpx.Response(500, json={"error": "quota exceeded"}))

    assert await client.ask("hi") is None
    await client.aclose()


async def test_chat_client_unreachable_proxy():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _chat_client(refuse)

    with pytest.raises(ChatProxyError):
        await client.ask("hi")
    await client.aclose()


async def test_chat_client_non_json_body():
    client = _chat_client(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))

    with pytest.raises(ChatProxyError):
        await client.ask("hi")
    await client.aclose()
