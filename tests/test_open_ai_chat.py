import json
from dataclasses import replace

import httpx
import pytest

from chat.OpenAIChat import OpenAIChat


def _completion(content="OK"):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "Proton",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture()
def captured():
    return []


@pytest.fixture()
def http_client(captured):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json=_completion())

    return httpx.Client(transport=httpx.MockTransport(handler))


def test_chat_sends_azure_style_query_and_header(cfg, http_client, captured):
    chat = OpenAIChat(cfg=cfg, http_client=http_client)

    resp = chat.chat(
        [{"role": "user", "content": "hi"}],
        temperature=0.7,
        max_tokens=500,
    )

    assert resp.choices[0].message.content == "OK"
    request = captured[0]
    assert str(request.url).startswith("https://chat.test/openai/chat/completions")
    assert request.url.params["api-version"] == "2025-01-01-preview"
    assert request.headers["api-key"] == "azure-test-key"
    assert request.headers["authorization"] == "Bearer openai-test-key"

    body = json.loads(request.content)
    assert body["model"] == "Proton"
    assert body["messages"] == [{"role": "user", "content": "hi"}]
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 500


def test_api_key_header_omitted_when_not_configured(cfg, http_client, captured):
    chat = OpenAIChat(cfg=replace(cfg, openai_azure_api_key=""), http_client=http_client)

    chat.chat([{"role": "user", "content": "hi"}])

    assert "api-key" not in captured[0].headers


def test_simple_chat_returns_answer_dict(cfg, http_client):
    chat = OpenAIChat(cfg=cfg, http_client=http_client)

    out = chat.simple_chat("ping", system_text="health", max_tokens=5)

    assert out["answer"] == "OK"
    assert out["model"] == "Proton"


def test_empty_messages_rejected(cfg, http_client):
    chat = OpenAIChat(cfg=cfg, http_client=http_client)

    with pytest.raises(ValueError):
        chat.chat([])


def test_healthcheck_false_on_server_error(cfg):
    failing = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(500, json={"error": {}})))
    chat = OpenAIChat(cfg=cfg, http_client=failing)

    assert chat.healthcheck() is False


def test_missing_model_rejected(cfg):
    with pytest.raises(ValueError):
        OpenAIChat(cfg=replace(cfg, openai_chat_model=""))
