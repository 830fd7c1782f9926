from __future__ import annotations

from typing import Any, Dict

from storefront.app.extensions import client
from storefront.app.common.form_fields import FORM_FIELD_SELECTION, known_fields

CUSTOMER_SETTINGS_QUERY = f"""
query CustomerSettingsQuery($addressFilters: FormFieldFiltersInput) {{
  customer {{
    entityId
    email
    firstName
    lastName
    company
    phone
  }}
  site {{
    settings {{
      formFields {{
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


def get_customer_settings_query(
    customer_id: int | str,
    address: Dict[str, Any] | None = None,
) -> Dict[str, Any] | None:
    """Settings page data, or None when the API does not know the customer."""
    response = client.fetch(
        CUSTOMER_SETTINGS_QUERY,
        {"addressFilters": (address or {}).get("filters")},
        customer_id=customer_id,
    )
    data = response.get("data") or {}
    customer_info = data.get("customer")
    if not customer_info:
        return None

    settings = (data.get("site") or {}).get("settings") or {}
    form_fields = settings.get("formFields") or {}
    return {
        "customerInfo": customer_info,
        "addressFields": known_fields(form_fields.get("shippingAddress")),
        "reCaptchaSettings": settings.get("reCaptcha"),
    }
