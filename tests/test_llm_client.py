import pytest
import requests

import llm_client
from errors import GenerationError
from llm_client import ChatCompletionsClient, build_llm_client
from llm_loader import TransformersChatClient


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


@pytest.fixture
def captured(monkeypatch):
    calls = {}

    def install(response):
        def fake_post(url, json=None, headers=None, timeout=None):
            calls.update(url=url, json=json, headers=headers, timeout=timeout)
            if isinstance(response, Exception):
                raise response
            return response
        monkeypatch.setattr(llm_client.requests, "post", fake_post)
        return calls

    return install


def test_chat_posts_openai_payload(captured):
    calls = captured(FakeResponse({"choices": [{"message": {"content": "  SELECT 1;\n"}}]}))
    client = ChatCompletionsClient(api_base="http://llm:9000/v1/", model="m", api_key="secret", timeout=5)

    assert client.chat([{"role": "user", "content": "hi"}]) == "SELECT 1;"
    assert calls["url"] == "http://llm:9000/v1/chat/completions"
    assert calls["json"]["model"] == "m"
    assert calls["headers"] == {"Authorization": "Bearer secret"}
    assert calls["timeout"] == 5


def test_chat_accepts_completion_style_payload(captured):
    captured(FakeResponse({"choices": [{"text": "SELECT 2;"}]}))
    assert ChatCompletionsClient(api_key="").chat([]) == "SELECT 2;"


def test_http_error_becomes_generation_error(captured):
    captured(FakeResponse({}, status_code=503))
    with pytest.raises(GenerationError):
        ChatCompletionsClient().chat([])


def test_connection_error_becomes_generation_error(captured):
    captured(requests.ConnectionError("refused"))
    with pytest.raises(GenerationError):
        ChatCompletionsClient().chat([])


def test_unexpected_payload_becomes_generation_error(captured):
    captured(FakeResponse({"foo": "bar"}))
    with pytest.raises(GenerationError):
        ChatCompletionsClient().chat([])


def test_settings_come_from_environment(monkeypatch):
    monkeypatch.setenv("LLM_API_BASE", "http://example:1234/v1")
    monkeypatch.setenv("LLM_MODEL", "gpt-4.1")
    monkeypatch.setenv("LLM_TIMEOUT", "7")
    client = ChatCompletionsClient()
    assert (client.api_base, client.model, client.timeout) == ("http://example:1234/v1", "gpt-4.1", 7)


def test_build_llm_client_selects_backend(monkeypatch):
    monkeypatch.setenv("LOCAL_MODEL_NAME", "tiny/model")
    assert isinstance(build_llm_client("http"), ChatCompletionsClient)

    local = build_llm_client("transformers")
    assert isinstance(local, TransformersChatClient)
    assert local.model_name == "tiny/model"
    assert local.model is None  # loaded on first chat only


def test_build_llm_client_rejects_unknown_backend():
    with pytest.raises(ValueError):
        build_llm_client("carrier-pigeon")
