# Role: Minimal wrapper around the OpenAI chat-completions API. Centralizes model name, persona,
# credentials, and error handling, so the rest of the code calls a single method: complete(messages).

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from openai import (
    APIConnectionError,
    APIResponseValidationError,
    APIStatusError,
    OpenAI,
    OpenAIError,
)

import pixelseeker.config as config
from pixelseeker.config import get_logger
from pixelseeker.errors import (
    DialogueError,
    ErrorKind,
    HTTPStatusError,
    MalformedResponseError,
    NetworkError,
    UpstreamError,
)
from pixelseeker.prompts.persona import build_persona_prompt

logger = get_logger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"


class DialogueClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        persona: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[OpenAI] = None,
    ) -> None:
        # Key lines:
        # - Reads secrets from env (no secrets in code).
        # - Model and persona are configuration, not hardcoded behavior.
        self.api_key = api_key or os.getenv("OPENAI_API_KEY", "")
        self.model_name = model or os.getenv("DIALOGUE_MODEL", DEFAULT_MODEL)
        self.persona = persona or build_persona_prompt()
        self.base_url = base_url or os.getenv("DIALOGUE_API_BASE_URL") or None
        self.timeout = timeout if timeout is not None else config.http_timeout_seconds()
        # Key line: lazy-init so a missing key degrades one turn instead of crashing startup.
        self._client = client

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise DialogueError("Missing OPENAI_API_KEY in environment or .env", kind=ErrorKind.CONFIGURATION)
            # Single attempt per turn: the SDK retries by default.
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    def build_messages(self, messages: List[Dict[str, str]]) -> List[Dict[str, str]]:
        return [{"role": "system", "content": self.persona}, *messages]

    def complete(self, messages: List[Dict[str, str]]) -> str:
        # 1) Prepend persona directive
        # 2) Single chat.completions call
        # 3) Extract choices[0].message.content
        try:
            client = self._get_client()
        except DialogueError as e:
            logger.error("Dialogue completion skipped [%s]: %s", e.kind.value, e)
            raise

        payload = self.build_messages(messages)
        logger.debug("Dialogue request: model=%s messages=%d", self.model_name, len(payload))

        try:
            return self._create(client, payload)
        except UpstreamError as e:
            err = DialogueError.wrap(e)
            logger.error("Dialogue completion failed [%s]: %s", err.kind.value, err)
            raise err from e

    def _create(self, client: OpenAI, payload: List[Dict[str, str]]) -> str:
        try:
            resp: Any = client.chat.completions.create(model=self.model_name, messages=payload)
        except APIStatusError as e:
            raise HTTPStatusError("Dialogue service returned an error status", status_code=e.status_code) from e
        except APIConnectionError as e:
            raise NetworkError(f"Dialogue request failed: {e}") from e
        except APIResponseValidationError as e:
            raise MalformedResponseError(f"Bad dialogue payload: {e}") from e
        except OpenAIError as e:
            raise NetworkError(f"Dialogue request failed: {e}") from e

        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise MalformedResponseError(f"Bad dialogue payload: {e!r}") from e

        if not isinstance(content, str):
            raise MalformedResponseError("Dialogue completion content is not text")

        return content
