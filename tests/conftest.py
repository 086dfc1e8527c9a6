import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest

from siftcheck.config import Settings


def make_settings(api_key: Optional[str] = "key-123", app_id: Optional[str] = "app-456", **kwargs) -> Settings:
    return Settings(BAIDU_API_KEY=api_key, BAIDU_APP_ID=app_id, _env_file=None, **kwargs)


def mock_response(status: int = 200, payload: Any = None, text: Optional[str] = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.text = text if text is not None else json.dumps(payload)
    if payload is None:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        resp.json.return_value = payload
    return resp


def completion(content: Optional[str]) -> dict:
    return {"id": "as-1", "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


REPORT = {
    "sift_analysis": {
        "stop": "The claim is extraordinary.",
        "investigate_source": "The blog has no editorial history.",
        "find_coverage": "No major outlet reports this.",
        "trace_claims": "No study supports the claim.",
    },
    "credibility_rating": "Suspected Fake",
    "final_advice": "Do not share.",
    "learning_tips": "Check who is behind a site before trusting it.",
}


@pytest.fixture
def settings() -> Settings:
    return make_settings()
