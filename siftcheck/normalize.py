"""
Turns a free-form model reply into a VerificationReport.

The model is asked for JSON but often wraps it in prose or code fences, or
answers in prose only. Extraction is best effort: the span from the first
"{" to the last "}" is parsed leniently and validated; anything that does
not survive becomes the default report instead of an error.
"""
import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .models import VerificationReport

logger = logging.getLogger(__name__)

DEFAULT_RATING = "Needs Caution"


def _reject_constant(name: str) -> None:
    # NaN and Infinity would be written back out as invalid JSON
    raise ValueError(f"non-standard JSON constant {name}")


def extract_json_object(text: Optional[str]) -> Optional[Dict[str, Any]]:
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    try:
        # strict=False tolerates raw newlines inside strings
        data = json.loads(text[start:end + 1], strict=False, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning("Failed to parse JSON from model reply: %s", e)
        return None
    return data if isinstance(data, dict) else None


def default_report(ai_content: Optional[str], source: str) -> Dict[str, Any]:
    """
    Templated fallback report. Only `source` affects the output, so the same
    source always yields the same report; `ai_content` is accepted for
    logging context.
    """
    subject = f'"{source}"' if source else "this source"
    return {
        "sift_analysis": {
            "stop": "Based on AI analysis, this information contains multiple elements that require verification. It is recommended to stop sharing and conduct further verification.",
            "investigate_source": f"The credibility and background of {subject} need further investigation.",
            "find_coverage": "It is recommended to search for relevant reports through authoritative news media and official channels for comparative verification.",
            "trace_claims": "Need to track the original source of the information and check if it has been modified or distorted.",
        },
        "credibility_rating": DEFAULT_RATING,
        "final_advice": "Do not easily believe or share this information. It is recommended to verify through multiple reliable channels.",
        "learning_tips": "When encountering suspicious information, first stop and think, then verify from multiple perspectives.",
    }


def parse_report(ai_content: Optional[str]) -> Optional[Dict[str, Any]]:
    data = extract_json_object(ai_content)
    if data is None:
        return None
    # echoed fields are overwritten later, whatever the model put there
    data.pop("content", None)
    data.pop("source", None)
    try:
        return VerificationReport.model_validate(data).model_dump()
    except ValidationError as e:
        logger.warning("Model reply is not a complete report (%d errors)", e.error_count())
        return None


def normalize_reply(ai_content: Optional[str], content: str, source: str) -> Dict[str, Any]:
    report = parse_report(ai_content)
    if report is None:
        snippet = (ai_content or "")[:200]
        logger.warning("Using default report; model reply began with: %r", snippet)
        report = default_report(ai_content, source)

    # always traceable to the request, whichever path produced the report
    report["content"] = content
    report["source"] = source
    return report
