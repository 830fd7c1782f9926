"""Mapping between the API's built-in form field ids and form input names.

Input names encode where a submitted value belongs once the form is folded
back into a mutation input: ``customer-email`` lands at the top level,
``address-city`` under ``address`` and ``customer-address-firstName`` in both.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from flask import Flask

FIELD_NAME_BY_ID = {
    1: "email",
    2: "password",
    3: "confirmPassword",
    4: "firstName",
    5: "lastName",
    6: "company",
    7: "phone",
    8: "address1",
    9: "address2",
    10: "city",
    11: "countryCode",
    12: "stateOrProvince",
    13: "postalCode",
}

CUSTOMER_FIELD_IDS = (1, 2, 3)
SHARED_FIELD_IDS = (4, 5, 6, 7)
ADDRESS_FIELD_IDS = (8, 9, 10, 11, 12, 13)

FORM_FIELD_SELECTION = """
  entityId
  label
  isRequired
  isBuiltIn
  __typename
  ... on TextFormField { defaultText maxLength }
  ... on PasswordFormField { maxLength }
"""


def default_sections(entity_id: int) -> Sequence[str]:
    if entity_id in CUSTOMER_FIELD_IDS:
        return ("customer",)
    if entity_id in SHARED_FIELD_IDS:
        return ("customer", "address")
    return ("address",)


def field_input_name(entity_id: int, sections: Sequence[str] | None = None) -> str:
    name = FIELD_NAME_BY_ID[entity_id]
    return "-".join([*(sections or default_sections(entity_id)), name])


def field_input_type(field: Dict[str, Any]) -> str:
    entity_id = field.get("entityId")
    if entity_id == 1:
        return "email"
    if entity_id in (2, 3) or field.get("__typename") == "PasswordFormField":
        return "password"
    if entity_id == 7:
        return "tel"
    return "text"


def known_fields(fields: Iterable[Dict[str, Any]] | None) -> List[Dict[str, Any]]:
    """Built-in fields we know how to submit; custom fields are dropped."""
    return [f for f in fields or [] if f.get("entityId") in FIELD_NAME_BY_ID]


def entity_filters(entity_ids: Iterable[int]) -> Dict[str, Any]:
    return {"filters": {"entityIds": list(entity_ids)}}


def field_name(entity_id: int) -> str | None:
    return FIELD_NAME_BY_ID.get(entity_id)


def init_form_fields(app: Flask) -> None:
    app.jinja_env.globals.update(
        field_name=field_name,
        field_input_name=field_input_name,
        field_input_type=field_input_type,
    )
