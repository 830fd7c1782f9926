from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from flask import Flask

from storefront.i18n.routing import get_default_locale, get_request_locale

MESSAGES_DIR = Path(__file__).resolve().parent / "messages"


@lru_cache(maxsize=None)
def load_messages(locale: str) -> Dict[str, Any]:
    path = MESSAGES_DIR / f"{locale}.json"
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _lookup(messages: Dict[str, Any], key: str) -> str | None:
    node: Any = messages
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(key: str, locale: str | None = None, **values: Any) -> str:
    """Message for a dotted key, falling back to the default locale, then the key."""
    locale = locale or get_request_locale()
    text = _lookup(load_messages(locale), key)
    if text is None:
        text = _lookup(load_messages(get_default_locale()), key)
    if text is None:
        return key
    return text.format(**values) if values else text


def init_messages(app: Flask) -> None:
    app.jinja_env.globals["t"] = translate
