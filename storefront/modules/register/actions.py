"""Customer registration form action.

Registration fields arrive flattened (``customer-email``, ``address-city``,
``customer-address-firstName``) and are folded back into the nested
``RegisterCustomerInput`` the API expects.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Tuple

from werkzeug.datastructures import MultiDict

from storefront.app.extensions import client
from storefront.app.common.results import (
    GENERIC_ERROR_MESSAGE,
    INPUT_ERROR_MESSAGE,
    SERVER_ERROR_MESSAGE,
    failure,
    join_error_messages,
    success,
)
from storefront.client.client import StorefrontAPIError

logger = logging.getLogger(__name__)

CONFIRM_PASSWORD_FIELD = "customer-confirmPassword"

REGISTER_CUSTOMER_MUTATION = """
mutation RegisterCustomer($input: RegisterCustomerInput!, $reCaptchaV2: ReCaptchaV2Input) {
  customer {
    registerCustomer(input: $input, reCaptchaV2: $reCaptchaV2) {
      customer {
        firstName
        lastName
      }
      errors {
        ... on EmailAlreadyInUseError {
          message
        }
        ... on AccountCreationDisabledError {
          message
        }
        ... on CustomerRegistrationError {
          message
        }
        ... on ValidationError {
          message
        }
      }
    }
  }
}
"""


def form_entries(form: Any) -> Iterable[Tuple[str, Any]]:
    if isinstance(form, MultiDict):
        return form.items(multi=True)
    return form.items()


def parse_form_fields(entries: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """Fold hyphenated field names into a two-level input object.

    The last segment of a name is the key; the segments before it pick the
    destination. ``customer`` writes to the top level and ``address`` writes
    under ``address``; a name may carry both. Names without a section are
    ignored and a later entry wins over an earlier one.
    """
    parsed: Dict[str, Any] = {"address": {}}
    for name, value in entries:
        *sections, key = name.split("-")
        # "address" always stays the nested bag
        if "customer" in sections and key != "address":
            parsed[key] = value
        if "address" in sections:
            parsed["address"][key] = value
    return parsed


def parse_register_form(form: Any) -> Dict[str, Any]:
    return parse_form_fields(
        (name, value) for name, value in form_entries(form) if name != CONFIRM_PASSWORD_FIELD
    )


def is_register_customer_input(data: Any) -> bool:
    return isinstance(data, dict) and "email" in data


def register_customer(form_data: Any, recaptcha_token: str | None = None) -> Dict[str, Any]:
    parsed = parse_register_form(form_data)

    if not is_register_customer_input(parsed):
        return failure(INPUT_ERROR_MESSAGE)

    variables: Dict[str, Any] = {"input": parsed}
    if recaptcha_token:
        variables["reCaptchaV2"] = {"token": recaptcha_token}

    try:
        response = client.fetch(REGISTER_CUSTOMER_MUTATION, variables)
        result = response["data"]["customer"]["registerCustomer"]

        if not result["errors"]:
            return success(parsed)

        return failure(join_error_messages(result["errors"]))
    except StorefrontAPIError:
        logger.exception("RegisterCustomer failed at the API")
        return failure(SERVER_ERROR_MESSAGE)
    except Exception:
        logger.exception("RegisterCustomer failed")
        return failure(GENERIC_ERROR_MESSAGE)
