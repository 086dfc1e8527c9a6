# siftcheck/handler.py
import base64
import binascii
import json
import logging
from typing import Any, Dict, NamedTuple, Optional, Union

from pydantic import ValidationError

from .config import Settings, get_settings
from .errors import ConfigurationError, InputError, MethodNotAllowedError, VerificationError
from .models import VerifyIn
from .normalize import normalize_reply
from .prompt import build_messages
from .qianfan import QianfanClient

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}


class HandlerResponse(NamedTuple):
    status_code: int
    headers: Dict[str, str]
    body: str


def _json_response(status_code: int, payload: Dict[str, Any]) -> HandlerResponse:
    return HandlerResponse(status_code, dict(CORS_HEADERS), json.dumps(payload, ensure_ascii=False))


def parse_request(body: Union[str, bytes, None]) -> VerifyIn:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if not body or not body.strip():
        raise InputError("Request body is required")
    try:
        data = json.loads(body)
    except ValueError:
        raise InputError("Request body must be valid JSON")
    if not isinstance(data, dict):
        raise InputError("Request body must be a JSON object")

    if data.get("source") is None:
        data.pop("source", None)
    try:
        payload = VerifyIn.model_validate(data)
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
        if "content" in fields:
            raise InputError("Content is required")
        raise InputError("Source must be a string")

    if not payload.content.strip():
        raise InputError("Content is required")
    return payload


def handle_request(method: str, body: Union[str, bytes, None], settings: Settings,
                   client: Optional[QianfanClient] = None) -> HandlerResponse:
    """
    Verify one claim.

    Preflight gets an empty 200. Everything else is answered with JSON and the
    same CORS headers, success or not. Input is validated before credentials
    are checked, so a bad request never reaches the upstream API.
    """
    method = (method or "").upper()
    if method == "OPTIONS":
        return HandlerResponse(200, dict(CORS_HEADERS), "")

    try:
        if method != "POST":
            raise MethodNotAllowedError(method)

        payload = parse_request(body)

        if not settings.is_configured:
            raise ConfigurationError(settings.has_api_key, settings.has_app_id)

        client = client or QianfanClient.from_settings(settings)
        ai_content = client.chat(
            build_messages(payload.content, payload.source),
            temperature=settings.TEMPERATURE,
            max_tokens=settings.MAX_TOKENS,
        )
        report = normalize_reply(ai_content, payload.content, payload.source)
        return _json_response(200, report)

    except VerificationError as e:
        if e.status_code >= 500:
            logger.error("Verification failed: %s", e)
        else:
            logger.info("Rejected request: %s", e)
        return _json_response(e.status_code, e.to_body())
    except Exception as e:
        logger.exception("Function error")
        return _json_response(500, {"error": "Internal server error", "message": str(e)})


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Netlify / AWS Lambda proxy entry point."""
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError):
            resp = _json_response(400, InputError("Request body is not valid base64").to_body())
            return {"statusCode": resp.status_code, "headers": resp.headers, "body": resp.body}
    resp = handle_request(event.get("httpMethod", ""), body, get_settings())
    return {"statusCode": resp.status_code, "headers": resp.headers, "body": resp.body}
