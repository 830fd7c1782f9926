from __future__ import annotations

from typing import Any, Dict

from storefront.app.extensions import client
from storefront.app.common.form_fields import (
    ADDRESS_FIELD_IDS,
    CUSTOMER_FIELD_IDS,
    FORM_FIELD_SELECTION,
    SHARED_FIELD_IDS,
    entity_filters,
    known_fields,
)

REGISTER_CUSTOMER_QUERY = f"""
query RegisterCustomerQuery($customerFilters: FormFieldFiltersInput, $addressFilters: FormFieldFiltersInput) {{
  site {{
    settings {{
      formFields {{
        customer(filters: $customerFilters) {{{FORM_FIELD_SELECTION}}}
        shippingAddress(filters: $addressFilters) {{{FORM_FIELD_SELECTION}}}
      }}
      reCaptcha {{
        isEnabledOnStorefront
        siteKey
      }}
    }}
  }}
}}
"""


def get_register_customer_query(
    customer: Dict[str, Any] | None = None,
    address: Dict[str, Any] | None = None,
) -> Dict[str, Any] | None:
    customer = customer or entity_filters(CUSTOMER_FIELD_IDS)
    address = address or entity_filters(SHARED_FIELD_IDS + ADDRESS_FIELD_IDS)

    response = client.fetch(
        REGISTER_CUSTOMER_QUERY,
        {"customerFilters": customer.get("filters"), "addressFilters": address.get("filters")},
    )
    settings = ((response.get("data") or {}).get("site") or {}).get("settings")
    if not settings:
        return None

    form_fields = settings.get("formFields") or {}
    return {
        "customerFields": known_fields(form_fields.get("customer")),
        "addressFields": known_fields(form_fields.get("shippingAddress")),
        "reCaptchaSettings": settings.get("reCaptcha"),
    }
