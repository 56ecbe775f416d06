"""Unit tests for AnthropicGraphClient."""

import json

import httpx
import pytest

from knowledge_galaxy.llm.prompts import KNOWLEDGE_GRAPH_SYSTEM_PROMPT, build_topic_prompt
from knowledge_galaxy.llm.remote_clients import AnthropicGraphClient
from knowledge_galaxy.utils.exceptions import LLMError, LLMTimeoutError, RateLimitError

ENDPOINT = "https://example.test/v1/messages"


def _client(handler, **kwargs):
    return AnthropicGraphClient(
        api_key="sk-test",
        endpoint=ENDPOINT,
        model="claude-test",
        max_tokens=512,
        temperature=0.3,
        timeout=2.0,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_generate_returns_first_text_block():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(
            200,
            json={"content": [{"type": "text", "text": '{"nodes": [], "links": []}'}]},
        )

    text = await _client(handler).generate("hello", system="be strict")

    assert text == '{"nodes": [], "links": []}'
    request = captured["request"]
    assert str(request.url) == ENDPOINT
    assert request.headers["x-api-key"] == "sk-test"
    assert request.headers["anthropic-version"] == "2023-06-01"
    body = json.loads(request.content)
    assert body == {
        "model": "claude-test",
        "max_tokens": 512,
        "temperature": 0.3,
        "system": "be strict",
        "messages": [{"role": "user", "content": "hello"}],
    }


@pytest.mark.asyncio
async def test_generate_without_system_prompt():
    def handler(request: httpx.Request) -> httpx.Response:
        assert "system" not in json.loads(request.content)
        return httpx.Response(200, json={"content": [{"type": "text", "text": "ok"}]})

    assert await _client(handler).generate("hello") == "ok"


@pytest.mark.asyncio
async def test_rate_limit_maps_to_rate_limit_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "slow down"})

    with pytest.raises(RateLimitError) as exc_info:
        await _client(handler).generate("hello")
    assert exc_info.value.retryable


@pytest.mark.asyncio
async def test_timeout_maps_to_retryable_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(LLMTimeoutError) as exc_info:
        await _client(handler).generate("hello")
    assert exc_info.value.retryable


@pytest.mark.asyncio
async def test_server_error_maps_to_llm_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    with pytest.raises(LLMError) as exc_info:
        await _client(handler).generate("hello")
    assert not isinstance(exc_info.value, LLMTimeoutError)
    assert not exc_info.value.retryable


@pytest.mark.asyncio
async def test_connection_error_maps_to_llm_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(LLMError):
        await _client(handler).generate("hello")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [{"content": []}, {"content": [{"type": "tool_use", "id": "x"}]}, {"id": "msg"}, []],
)
async def test_reply_without_text_is_an_error(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(LLMError):
        await _client(handler).generate("hello")


@pytest.mark.asyncio
async def test_non_json_body_is_an_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(LLMError):
        await _client(handler).generate("hello")


def test_defaults_come_from_config():
    client = AnthropicGraphClient(api_key="sk-test")
    assert client.endpoint
    assert client.model
    assert client.max_tokens > 0
    assert client.timeout > 0


def test_prompts_describe_wire_format():
    assert '"val"' in KNOWLEDGE_GRAPH_SYSTEM_PROMPT
    assert '"links"' in KNOWLEDGE_GRAPH_SYSTEM_PROMPT
    assert "other" in KNOWLEDGE_GRAPH_SYSTEM_PROMPT
    assert build_topic_prompt('say "hi"').startswith(
        'Generate a comprehensive knowledge graph for: "say \\"hi\\""'
    )
