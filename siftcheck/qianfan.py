import logging
from typing import Any, Dict, List, Optional

import requests

from .config import QIANFAN_CHAT_URL, Settings
from .errors import UpstreamError

logger = logging.getLogger(__name__)


class QianfanClient:
    """Minimal client for the Qianfan v2 chat-completions endpoint."""

    def __init__(self, api_key: str, app_id: str, url: str = QIANFAN_CHAT_URL,
                 model: Optional[str] = None, timeout: float = 25.0):
        self.api_key = api_key
        self.app_id = app_id
        self.url = url
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "QianfanClient":
        return cls(
            api_key=settings.BAIDU_API_KEY,
            app_id=settings.BAIDU_APP_ID,
            url=settings.QIANFAN_API_URL,
            model=settings.QIANFAN_MODEL,
            timeout=settings.REQUEST_TIMEOUT,
        )

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "X-Appid": self.app_id,
        }

    def chat(self, messages: List[Dict[str, str]], temperature: float = 0.3,
             max_tokens: int = 2000) -> str:
        """Send one chat-completion request and return the assistant's text."""
        payload: Dict[str, Any] = {
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if self.model:
            payload["model"] = self.model

        logger.info("Preparing to call Qianfan API...")
        try:
            resp = requests.post(self.url, json=payload, headers=self._headers(), timeout=self.timeout)
        except requests.Timeout as e:
            raise UpstreamError(f"API request timed out after {self.timeout:g}s") from e
        except requests.RequestException as e:
            raise UpstreamError(f"API request failed: {e.__class__.__name__}") from e

        if not resp.ok:
            logger.error("API response error: %s %s", resp.status_code, resp.text)
            raise UpstreamError(
                f"API request failed with status {resp.status_code}",
                status=resp.status_code,
                body=resp.text,
            )

        try:
            data = resp.json()
            text = data["choices"][0]["message"]["content"]
            if text is not None and not isinstance(text, str):
                raise TypeError(f"content is {type(text).__name__}")
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected API response shape: %s", resp.text[:500])
            raise UpstreamError("API returned an unexpected response", status=resp.status_code,
                                body=resp.text) from e
        return text or ""
