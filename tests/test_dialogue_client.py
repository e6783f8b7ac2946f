"""Tests for the chat-completions adapter (OpenAI SDK mocked)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import Mock, patch

import httpx
import openai
import pytest

from pixelseeker.errors import DialogueError, ErrorKind
from pixelseeker.llm.dialogue_client import DEFAULT_MODEL, DialogueClient
from pixelseeker.prompts.persona import DEFAULT_PERSONA

_REQUEST = httpx.Request("POST", "https://llm.test/v1/chat/completions")


def _completion(content) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(role="assistant", content=content))])


def _sdk(result=None, error: Exception | None = None) -> Mock:
    sdk = Mock()
    if error is not None:
        sdk.chat.completions.create.side_effect = error
    else:
        sdk.chat.completions.create.return_value = result
    return sdk


def _client(sdk: Mock, **kwargs) -> DialogueClient:
    kwargs.setdefault("api_key", "sk-test")
    return DialogueClient(timeout=5, client=sdk, **kwargs)


HISTORY = [
    {"role": "assistant", "content": "Welcome!"},
    {"role": "user", "content": "what is a roguelike"},
]


def test_prepends_persona_and_uses_model() -> None:
    sdk = _sdk(_completion("It is a genre."))

    text = _client(sdk, model="test-model", persona="You are a test persona.").complete(HISTORY)

    assert text == "It is a genre."
    sdk.chat.completions.create.assert_called_once_with(
        model="test-model",
        messages=[{"role": "system", "content": "You are a test persona."}, *HISTORY],
    )


def test_builds_sdk_client_without_retries() -> None:
    with patch("pixelseeker.llm.dialogue_client.OpenAI") as sdk_cls:
        sdk_cls.return_value = _sdk(_completion("hi"))
        client = DialogueClient(api_key="sk-test", base_url="https://llm.test/v1", timeout=5)

        assert client.complete(HISTORY) == "hi"

    sdk_cls.assert_called_once_with(api_key="sk-test", base_url="https://llm.test/v1", timeout=5, max_retries=0)


def test_defaults_model_and_persona(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DIALOGUE_MODEL", raising=False)
    monkeypatch.delenv("PIXELSEEKER_PERSONA", raising=False)

    client = _client(Mock())

    assert client.model_name == DEFAULT_MODEL
    assert client.build_messages(HISTORY)[0] == {"role": "system", "content": DEFAULT_PERSONA}


def test_persona_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIXELSEEKER_PERSONA", "You only talk about chess games.")
    assert _client(Mock()).persona == "You only talk about chess games."


def test_returns_completion_verbatim() -> None:
    sdk = _sdk(_completion("  **Spelunky** is a classic.\n"))
    assert _client(sdk).complete(HISTORY) == "  **Spelunky** is a classic.\n"


@pytest.mark.parametrize(
    "error",
    [
        openai.APIConnectionError(request=_REQUEST),
        openai.APITimeoutError(request=_REQUEST),
    ],
)
def test_transport_failure_raises_dialogue_error(error: Exception) -> None:
    with pytest.raises(DialogueError) as exc_info:
        _client(_sdk(error=error)).complete(HISTORY)

    assert exc_info.value.kind == ErrorKind.NETWORK


def test_error_status_raises_dialogue_error() -> None:
    error = openai.APIStatusError(
        "rate limited",
        response=httpx.Response(429, request=_REQUEST),
        body={"error": {"message": "rate limited"}},
    )

    with pytest.raises(DialogueError) as exc_info:
        _client(_sdk(error=error)).complete(HISTORY)

    assert exc_info.value.kind == ErrorKind.HTTP_STATUS
    assert exc_info.value.status_code == 429


@pytest.mark.parametrize(
    "result",
    [
        SimpleNamespace(choices=[]),
        SimpleNamespace(id="x"),
        SimpleNamespace(choices=[SimpleNamespace()]),
        _completion(None),
        None,
    ],
)
def test_missing_completion_raises_dialogue_error(result) -> None:
    with pytest.raises(DialogueError) as exc_info:
        _client(_sdk(result)).complete(HISTORY)

    assert exc_info.value.kind == ErrorKind.MALFORMED_RESPONSE


def test_missing_api_key_fails_without_request(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with patch("pixelseeker.llm.dialogue_client.OpenAI") as sdk_cls:
        with pytest.raises(DialogueError) as exc_info:
            DialogueClient().complete(HISTORY)

    assert exc_info.value.kind == ErrorKind.CONFIGURATION
    sdk_cls.assert_not_called()


def test_single_attempt_per_call() -> None:
    sdk = _sdk(error=openai.APIConnectionError(request=_REQUEST))

    with pytest.raises(DialogueError):
        _client(sdk).complete(HISTORY)

    assert sdk.chat.completions.create.call_count == 1
