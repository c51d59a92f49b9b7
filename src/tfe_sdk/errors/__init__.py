"""
Error classes for the TFE SDK
"""

import logging
from typing import Optional, List

import httpx

logger = logging.getLogger(__name__)


class TFEError(Exception):
    """Base error class for TFE SDK errors"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class ValidationError(TFEError):
    """Required input is missing; raised before any request is sent"""

    def __init__(self, field_name: str):
        super().__init__(f"{field_name} is required")
        self.field_name = field_name


class NotFoundError(TFEError):
    """Requested resource does not exist"""

    def __init__(self) -> None:
        super().__init__("Resource not found", 404)


class UnauthorizedError(TFEError):
    """Token is missing or not accepted"""

    def __init__(self) -> None:
        super().__init__("Unauthorized", 401)


class RemoteError(TFEError):
    """Server rejected an otherwise well-formed request"""


def _error_messages(response_data: dict) -> List[str]:
    messages = []
    for entry in response_data.get("errors") or []:
        if isinstance(entry, str):
            messages.append(entry)
        elif isinstance(entry, dict):
            message = entry.get("detail") or entry.get("title")
            if message:
                messages.append(message)
    return messages


def parse_error_response(status_code: int, response_data: dict, reason: str = "") -> TFEError:
    """Parse error response from API into appropriate error class"""
    if status_code == 401:
        return UnauthorizedError()
    if status_code == 404:
        return NotFoundError()

    messages = _error_messages(response_data)
    message = "\n".join(messages) if messages else (reason or f"HTTP {status_code}")
    return RemoteError(message, status_code)


def check_response(response: httpx.Response) -> None:
    """Raise the matching TFEError when the response is not a success"""
    if response.is_success:
        return

    try:
        data = response.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    error = parse_error_response(response.status_code, data, response.reason_phrase)
    logger.warning(
        "%s %s failed with %d: %s",
        response.request.method,
        response.request.url,
        response.status_code,
        error.message,
    )
    raise error
