from types import SimpleNamespace

import openai
import pytest

from answer_gate.config import Settings
from answer_gate.errors import JudgmentUnavailableError
from answer_gate.llm.openai_client import OpenAIClient


class DummyResponse:
    def __init__(self, content):
        self.content = content


class FakeCompletions:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.exc is not None:
            raise self.exc
        return self.response


def _client_with(completions, **settings):
    client = OpenAIClient(Settings(openai_api_key="sk-test", **settings))
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client


@pytest.mark.asyncio
async def test_judge_returns_reply_text():
    response = SimpleNamespace(choices=[SimpleNamespace(message=DummyResponse('{"isGibberish": false}'))])
    completions = FakeCompletions(response=response)
    client = _client_with(completions, openai_model="gpt-4o-mini", judge_max_tokens=300)

    text = await client.judge("prompt text")

    assert text == '{"isGibberish": false}'
    assert completions.kwargs["model"] == "gpt-4o-mini"
    assert completions.kwargs["max_tokens"] == 300
    assert completions.kwargs["messages"] == [{"role": "user", "content": "prompt text"}]


@pytest.mark.asyncio
async def test_sdk_error_becomes_unavailable():
    client = _client_with(FakeCompletions(exc=openai.OpenAIError("overloaded")))
    with pytest.raises(JudgmentUnavailableError) as exc_info:
        await client.judge("prompt")
    assert "overloaded" in exc_info.value.message


@pytest.mark.asyncio
async def test_no_choices_becomes_unavailable():
    client = _client_with(FakeCompletions(response=SimpleNamespace(choices=[])))
    with pytest.raises(JudgmentUnavailableError):
        await client.judge("prompt")


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [None, "", "   "])
async def test_empty_content_becomes_unavailable(monkeypatch, content):
    async def mock_call(*_args, **_kwargs):
        return DummyResponse(content)

    monkeypatch.setattr(OpenAIClient, "call", mock_call, raising=True)
    client = OpenAIClient(Settings(openai_api_key="sk-test"))
    with pytest.raises(JudgmentUnavailableError):
        await client.judge("prompt")


@pytest.mark.asyncio
async def test_missing_api_key_is_unavailable():
    client = OpenAIClient(Settings(openai_api_key=None))
    with pytest.raises(JudgmentUnavailableError):
        await client.judge("prompt")
