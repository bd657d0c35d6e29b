"""Client for the chat-completion language model backend."""

import logging
from typing import Any, Dict, List, Optional, Sequence

import requests
from langchain_core.messages import BaseMessage

from ..config import settings
from .errors import BackendError, BackendUnavailable

_ROLE_BY_MESSAGE_TYPE = {"system": "system", "human": "user", "ai": "assistant"}


def to_wire_messages(system_prompt: str, history: Sequence[BaseMessage], user_message: str) -> List[Dict[str, str]]:
    messages = [{"role": "system", "content": system_prompt}]
    for message in history:
        role = _ROLE_BY_MESSAGE_TYPE.get(message.type, "user")
        messages.append({"role": role, "content": str(message.content)})
    messages.append({"role": "user", "content": user_message})
    return messages


class CompletionClient:
    """Single-shot POST to ``{base_url}/chat/completions``. No retries."""

    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None,
                 model: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = base_url if base_url is not None else settings.COMPLETION_BASE_URL
        self.api_key = api_key if api_key is not None else settings.COMPLETION_API_KEY
        self.model = model or settings.COMPLETION_MODEL
        self.timeout = timeout if timeout is not None else settings.COMPLETION_TIMEOUT

    def complete(self, system_prompt: str, history: Sequence[BaseMessage], user_message: str) -> str:
        if not self.base_url or not self.api_key:
            raise BackendUnavailable("Completion backend configuration missing (COMPLETION_BASE_URL / COMPLETION_API_KEY).")

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": to_wire_messages(system_prompt, history, user_message),
            "temperature": settings.COMPLETION_TEMPERATURE,
            "max_tokens": settings.COMPLETION_MAX_TOKENS,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        url = f"{self.base_url.rstrip('/')}/chat/completions"

        logging.info(f"Calling completion backend with {len(payload['messages'])} messages.")
        try:
            response = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise BackendError(f"Completion backend request failed: {e}") from e
        except ValueError as e:
            raise BackendError(f"Completion backend returned invalid JSON: {e}") from e

        choices = data.get("choices") or [{}]
        content = (choices[0].get("message") or {}).get("content")
        if not content:
            logging.warning("Completion backend returned no content.")
            return settings.EMPTY_COMPLETION_MESSAGE

        logging.info(f"Completion content snippet: {content[:200]}...")
        return content
