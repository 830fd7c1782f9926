"""Tagged results returned by form actions.

``{"status": "success", "data": ...}`` or ``{"status": "error", "error": "..."}``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

INPUT_ERROR_MESSAGE = "Something went wrong with processing user input"
SERVER_ERROR_MESSAGE = "Looks like we are experiencing a server error, please try again in a few minutes."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again later."

SENSITIVE_KEYS = {"password", "confirmPassword", "currentPassword", "newPassword"}


def success(data: Any = None) -> Dict[str, Any]:
    return {"status": "success", "data": data}


def failure(message: str) -> Dict[str, Any]:
    return {"status": "error", "error": message}


def is_success(result: Dict[str, Any]) -> bool:
    return result.get("status") == "success"


def join_error_messages(errors: Iterable[Dict[str, Any]]) -> str:
    return "\n".join(error["message"] for error in errors)


def redact(value: Any) -> Any:
    """Drop password fields (at any depth) before a result leaves the server."""
    if isinstance(value, dict):
        return {k: redact(v) for k, v in value.items() if k not in SENSITIVE_KEYS}
    return value


def public_result(result: Dict[str, Any]) -> Dict[str, Any]:
    if is_success(result):
        return success(redact(result.get("data")))
    return result
