"""Account settings form actions: profile update and password change."""

from __future__ import annotations

import logging
from typing import Any, Dict

from storefront.app.extensions import client
from storefront.app.common.results import (
    GENERIC_ERROR_MESSAGE,
    INPUT_ERROR_MESSAGE,
    SERVER_ERROR_MESSAGE,
    failure,
    join_error_messages,
    success,
)
from storefront.app.common.validation import get_password_errors, non_text_fields, require_fields
from storefront.client.client import StorefrontAPIError
from storefront.modules.register.actions import form_entries, parse_form_fields

logger = logging.getLogger(__name__)

UPDATABLE_CUSTOMER_FIELDS = ("firstName", "lastName", "email", "phone", "company")

CURRENT_PASSWORD_FIELD = "current-password"
NEW_PASSWORD_FIELD = "new-password"
CONFIRM_PASSWORD_FIELD = "confirm-password"

UPDATE_CUSTOMER_MUTATION = """
mutation UpdateCustomer($input: UpdateCustomerInput!) {
  customer {
    updateCustomer(input: $input) {
      customer {
        firstName
        lastName
      }
      errors {
        ... on UnexpectedSettingsError {
          message
        }
        ... on EmailAlreadyInUseError {
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

CUSTOMER_CHANGE_PASSWORD_MUTATION = """
mutation CustomerChangePassword($input: CustomerChangePasswordInput!) {
  customer {
    changePassword(input: $input) {
      errors {
        ... on ValidationError {
          message
        }
        ... on CustomerDoesNotExistError {
          message
        }
        ... on CustomerPasswordError {
          message
        }
        ... on CustomerNotLoggedInError {
          message
        }
      }
    }
  }
}
"""


def parse_update_customer_form(form: Any) -> Dict[str, Any]:
    parsed = parse_form_fields(form_entries(form))
    return {k: parsed[k] for k in UPDATABLE_CUSTOMER_FIELDS if k in parsed}


def update_customer(form_data: Any, customer_id: int | str) -> Dict[str, Any]:
    parsed = parse_update_customer_form(form_data)
    if not parsed:
        return failure(INPUT_ERROR_MESSAGE)

    try:
        response = client.fetch(UPDATE_CUSTOMER_MUTATION, {"input": parsed}, customer_id=customer_id)
        result = response["data"]["customer"]["updateCustomer"]

        if not result["errors"]:
            return success(result["customer"])

        return failure(join_error_messages(result["errors"]))
    except StorefrontAPIError:
        logger.exception("UpdateCustomer failed at the API")
        return failure(SERVER_ERROR_MESSAGE)
    except Exception:
        logger.exception("UpdateCustomer failed")
        return failure(GENERIC_ERROR_MESSAGE)


def validate_change_password_form(form: Any) -> list[str]:
    fields = [CURRENT_PASSWORD_FIELD, NEW_PASSWORD_FIELD, CONFIRM_PASSWORD_FIELD]
    not_text = non_text_fields(form, fields)
    if not_text:
        return [f"{name} must be text" for name in not_text]

    missing = require_fields(form, fields)
    if missing:
        return [f"{name} is required" for name in missing]

    new_password = form.get(NEW_PASSWORD_FIELD)
    if new_password != form.get(CONFIRM_PASSWORD_FIELD):
        return ["Passwords don't match"]

    return get_password_errors(new_password)


def change_password(form_data: Any, customer_id: int | str) -> Dict[str, Any]:
    problems = validate_change_password_form(form_data)
    if problems:
        return failure("\n".join(problems))

    variables = {
        "input": {
            "currentPassword": form_data.get(CURRENT_PASSWORD_FIELD),
            "newPassword": form_data.get(NEW_PASSWORD_FIELD),
        }
    }

    try:
        response = client.fetch(CUSTOMER_CHANGE_PASSWORD_MUTATION, variables, customer_id=customer_id)
        result = response["data"]["customer"]["changePassword"]

        if not result["errors"]:
            return success()

        return failure(join_error_messages(result["errors"]))
    except StorefrontAPIError:
        logger.exception("CustomerChangePassword failed at the API")
        return failure(SERVER_ERROR_MESSAGE)
    except Exception:
        logger.exception("CustomerChangePassword failed")
        return failure(GENERIC_ERROR_MESSAGE)
