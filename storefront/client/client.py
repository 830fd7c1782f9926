"""Thin client for the hosted GraphQL Storefront API.

Each call is a single POST; there is no retry or caching layer. Customer
specific queries are made with the impersonation token plus the
``X-Bc-Customer-Id`` header.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

import requests
from flask import Flask, current_app

from storefront.app.common.request_context import REQUEST_ID_HEADER, current_request_id

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL_ID = "1"
CUSTOMER_ID_HEADER = "X-Bc-Customer-Id"
USER_AGENT = "storefront-python"

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+([A-Za-z_][A-Za-z0-9_]*)")


@dataclass
class StorefrontAPIError(Exception):
    """Raised when the API answers with a non-2xx status."""

    status_code: int
    reason: str = ""

    def __str__(self) -> str:
        return f"Storefront API Error: {self.status_code} {self.reason}".rstrip()


def graphql_endpoint(store_hash: str, channel_id: str | int | None = None) -> str:
    if channel_id and str(channel_id) != DEFAULT_CHANNEL_ID:
        return f"https://store-{store_hash}-{channel_id}.mybigcommerce.com/graphql"
    return f"https://store-{store_hash}.mybigcommerce.com/graphql"


def operation_name(document: str) -> str:
    match = _OPERATION_RE.search(document)
    return match.group(2) if match else "anonymous"


class StorefrontClient:
    def __init__(self, app: Flask | None = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        if not app.config.get("BIGCOMMERCE_GRAPHQL_URL") and not app.config.get("BIGCOMMERCE_STORE_HASH"):
            app.logger.warning("BIGCOMMERCE_STORE_HASH is not set; Storefront API calls will fail")
        app.extensions["storefront_client"] = self

    def endpoint(self) -> str:
        cfg = current_app.config
        return cfg.get("BIGCOMMERCE_GRAPHQL_URL") or graphql_endpoint(
            cfg.get("BIGCOMMERCE_STORE_HASH", ""), cfg.get("BIGCOMMERCE_CHANNEL_ID")
        )

    def headers(self, customer_id: int | str | None = None) -> dict[str, str]:
        token = current_app.config.get("BIGCOMMERCE_CUSTOMER_IMPERSONATION_TOKEN", "")
        hdrs = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
            "User-Agent": USER_AGENT,
        }
        if customer_id:
            hdrs[CUSTOMER_ID_HEADER] = str(customer_id)
        rid = current_request_id()
        if rid:
            hdrs[REQUEST_ID_HEADER] = rid
        return hdrs

    def fetch(
        self,
        document: str,
        variables: Mapping[str, Any] | None = None,
        customer_id: int | str | None = None,
    ) -> dict:
        """Run a query or mutation and return the decoded JSON body.

        Raises StorefrontAPIError for non-2xx answers; connection problems
        surface as the underlying ``requests`` exceptions.
        """
        name = operation_name(document)
        resp = requests.post(
            self.endpoint(),
            json={"query": document, "variables": dict(variables or {})},
            headers=self.headers(customer_id),
            timeout=float(current_app.config.get("BIGCOMMERCE_API_TIMEOUT", 10)),
        )
        logger.info("Storefront API %s -> %s", name, resp.status_code)
        if resp.status_code // 100 != 2:
            raise StorefrontAPIError(status_code=int(resp.status_code), reason=resp.reason or "")
        return resp.json()
