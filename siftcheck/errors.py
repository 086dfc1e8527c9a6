from typing import Any, Dict, Optional


class VerificationError(Exception):
    """Base class for failures that map onto a JSON error response."""

    status_code = 500
    error = "Internal server error"

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.error}


class InputError(VerificationError):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.error = message


class MethodNotAllowedError(VerificationError):
    status_code = 405
    error = "Method not allowed"

    def __init__(self, method: str):
        super().__init__(f"{self.error}: {method}")


class ConfigurationError(VerificationError):
    """Credentials are missing; the flags say which one."""

    error = "API credentials not configured"

    def __init__(self, has_api_key: bool, has_app_id: bool):
        super().__init__(self.error)
        self.has_api_key = has_api_key
        self.has_app_id = has_app_id

    def to_body(self) -> Dict[str, Any]:
        return {
            "error": self.error,
            "hasApiKey": self.has_api_key,
            "hasAppId": self.has_app_id,
        }


class UpstreamError(VerificationError):
    """
    The completion API could not be reached or answered with a non-2xx status.
    `body` keeps the raw provider text for logs; it is never sent to the caller.
    """

    error = "Upstream API request failed"

    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message, "status": self.status}
