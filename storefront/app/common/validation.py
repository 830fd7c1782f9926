from __future__ import annotations

import re
from typing import Any, Dict, Iterable
from flask import request
from werkzeug.datastructures import MultiDict

from storefront.app.common.errors import abort_json


def get_json() -> Dict[str, Any]:
    if not request.is_json:
        abort_json(400, "invalid_json", "Request must be application/json")
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        abort_json(400, "invalid_json", "Malformed JSON body")
    return data


def get_form() -> MultiDict:
    """Form fields from either a regular form post or a flat JSON object."""
    if request.is_json:
        return MultiDict(get_json())
    return request.form


def require_fields(data: Dict[str, Any], fields: Iterable[str]) -> list[str]:
    """Names of fields that are absent, blank, or not text."""
    missing = []
    for f in fields:
        value = data.get(f)
        if not isinstance(value, str) or not value.strip():
            missing.append(f)
    return missing


def non_text_fields(data: Dict[str, Any], fields: Iterable[str]) -> list[str]:
    return [f for f in fields if f in data and not isinstance(data.get(f), str)]


def get_password_errors(password: str) -> list[str]:
    errors = []

    if len(password) < 8:
        errors.append("Password must be at least 8 characters")

    if not re.search(r"[A-Z]", password):
        errors.append("Password must include one uppercase letter")

    if not re.search(r"[a-z]", password):
        errors.append("Password must include one lowercase letter")

    if not re.search(r"[0-9]", password):
        errors.append("Password must include one number")

    if not re.search(r"[!@#$%^&*(),.?\":{}|<>]", password):
        errors.append("Password must include one special character")

    return errors
