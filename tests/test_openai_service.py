import asyncio
from types import SimpleNamespace

import pytest

from cleansync import config
from cleansync.services import openai_service


class FakeResponses:
    def __init__(self, output_text="Sure, I can help.", response_id="resp_123"):
        self.calls = []
        self.output_text = output_text
        self.response_id = response_id

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(id=self.response_id, output_text=self.output_text)


@pytest.fixture
def fake_responses(monkeypatch):
    responses = FakeResponses()
    monkeypatch.setattr(openai_service, "get_openai_client", lambda: SimpleNamespace(responses=responses))
    return responses


def test_is_configured_follows_api_key(monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", "")
    assert openai_service.is_configured() is False

    monkeypatch.setattr(config, "OPENAI_API_KEY", "sk-test")
    assert openai_service.is_configured() is True


def test_new_conversation(fake_responses):
    result = asyncio.run(openai_service.ask_assistant("When can you come?"))

    assert result == {"message": "Sure, I can help.", "threadId": "resp_123"}
    call = fake_responses.calls[0]
    assert call["input"] == "When can you come?"
    assert call["model"] == config.OPENAI_MODEL
    assert call["instructions"] == openai_service.ASSISTANT_INSTRUCTIONS
    assert "previous_response_id" not in call


def test_thread_id_continues_conversation(fake_responses):
    asyncio.run(openai_service.ask_assistant("And next week?", thread_id="resp_100"))

    assert fake_responses.calls[0]["previous_response_id"] == "resp_100"


def test_empty_output_gets_fallback_text(monkeypatch):
    responses = FakeResponses(output_text="")
    monkeypatch.setattr(openai_service, "get_openai_client", lambda: SimpleNamespace(responses=responses))

    result = asyncio.run(openai_service.ask_assistant("Hi"))

    assert result["message"] == "Unable to process response"


def test_client_requires_api_key(monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", "")
    monkeypatch.setattr(openai_service, "_client", None)

    with pytest.raises(RuntimeError):
        openai_service.get_openai_client()
