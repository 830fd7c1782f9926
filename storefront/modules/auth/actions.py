from __future__ import annotations

import logging
from typing import Any, Dict

from storefront.app.extensions import client
from storefront.app.common.results import (
    GENERIC_ERROR_MESSAGE,
    SERVER_ERROR_MESSAGE,
    failure,
    success,
)
from storefront.client.client import StorefrontAPIError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = (
    "Your email address or password is incorrect. Try logging in again or reset your password."
)

LOGIN_MUTATION = """
mutation Login($email: String!, $password: String!) {
  login(email: $email, password: $password) {
    customer {
      entityId
      firstName
      lastName
    }
  }
}
"""


def login(form_data: Any) -> Dict[str, Any]:
    email = form_data.get("email")
    password = form_data.get("password")
    if not isinstance(email, str) or not isinstance(password, str):
        return failure(INVALID_CREDENTIALS_MESSAGE)

    email = email.strip()
    if not email or not password:
        return failure(INVALID_CREDENTIALS_MESSAGE)

    try:
        response = client.fetch(LOGIN_MUTATION, {"email": email, "password": password})
    except StorefrontAPIError:
        logger.exception("Login failed at the API")
        return failure(SERVER_ERROR_MESSAGE)
    except Exception:
        logger.exception("Login failed")
        return failure(GENERIC_ERROR_MESSAGE)

    # Bad credentials come back as a top-level GraphQL error with no data
    customer = (((response.get("data") or {}).get("login")) or {}).get("customer")
    if not customer:
        return failure(INVALID_CREDENTIALS_MESSAGE)

    return success(customer)
