import requests
from werkzeug.datastructures import MultiDict

from storefront.client.client import StorefrontAPIError
from storefront.modules.register.actions import (
    is_register_customer_input,
    parse_register_form,
    register_customer,
)

REGISTRATION_FORM = MultiDict([
    ("customer-email", "jane@example.com"),
    ("customer-password", "Secret123!"),
    ("customer-confirmPassword", "Secret123!"),
    ("customer-address-firstName", "Jane"),
    ("customer-address-lastName", "Doe"),
    ("address-address1", "1 Main St"),
    ("address-city", "NYC"),
    ("address-countryCode", "US"),
    ("address-postalCode", "10001"),
])


def registered(errors=None):
    return {"data": {"customer": {"registerCustomer": {"customer": {"firstName": "Jane", "lastName": "Doe"}, "errors": errors or []}}}}


def test_customer_field_goes_to_top_level():
    assert parse_register_form(MultiDict({"customer-firstName": "Jane"})) == {"firstName": "Jane", "address": {}}


def test_address_field_is_nested():
    assert parse_register_form(MultiDict({"address-city": "NYC"})) == {"address": {"city": "NYC"}}


def test_field_in_both_sections_lands_in_both():
    parsed = parse_register_form(MultiDict({"customer-address-firstName": "Jane"}))
    assert parsed == {"firstName": "Jane", "address": {"firstName": "Jane"}}


def test_confirm_password_is_dropped():
    parsed = parse_register_form(REGISTRATION_FORM)
    assert "confirmPassword" not in parsed
    assert parsed["password"] == "Secret123!"
    assert parsed["address"] == {
        "firstName": "Jane",
        "lastName": "Doe",
        "address1": "1 Main St",
        "city": "NYC",
        "countryCode": "US",
        "postalCode": "10001",
    }


def test_names_without_a_section_are_ignored():
    parsed = parse_register_form(MultiDict({"email": "x@example.com", "g-recaptcha-response": "tok"}))
    assert parsed == {"address": {}}


def test_later_duplicate_wins():
    form = MultiDict([("customer-email", "first@example.com"), ("customer-email", "second@example.com")])
    assert parse_register_form(form)["email"] == "second@example.com"


def test_address_bag_cannot_be_overwritten():
    form = MultiDict([("address-city", "NYC"), ("customer-address", "oops")])
    assert parse_register_form(form)["address"] == {"city": "NYC"}


def test_plain_dict_is_accepted():
    assert parse_register_form({"customer-email": "a@b.co"}) == {"email": "a@b.co", "address": {}}


def test_register_customer_input_guard():
    assert is_register_customer_input({"email": "a@b.co", "address": {}})
    assert not is_register_customer_input({"address": {}})
    assert not is_register_customer_input(None)


def test_missing_email_never_reaches_the_api(fake_api):
    result = register_customer(MultiDict({"customer-firstName": "Jane"}))
    assert result == {"status": "error", "error": "Something went wrong with processing user input"}
    assert fake_api.calls == []


def test_success_returns_parsed_input(fake_api):
    fake_api.respond("RegisterCustomer", registered())

    result = register_customer(REGISTRATION_FORM)

    assert result["status"] == "success"
    assert result["data"]["email"] == "jane@example.com"
    variables = fake_api.last_call("RegisterCustomer")["variables"]
    assert variables["input"] == result["data"]
    assert "reCaptchaV2" not in variables


def test_recaptcha_token_is_forwarded(fake_api):
    fake_api.respond("RegisterCustomer", registered())

    register_customer(REGISTRATION_FORM, recaptcha_token="tok-1")

    assert fake_api.last_call("RegisterCustomer")["variables"]["reCaptchaV2"] == {"token": "tok-1"}


def test_empty_recaptcha_token_is_not_sent(fake_api):
    fake_api.respond("RegisterCustomer", registered())

    register_customer(REGISTRATION_FORM, recaptcha_token="")

    assert "reCaptchaV2" not in fake_api.last_call("RegisterCustomer")["variables"]


def test_domain_errors_are_joined(fake_api):
    fake_api.respond("RegisterCustomer", registered([
        {"message": "Email already in use"},
        {"message": "Password is too weak"},
    ]))

    result = register_customer(REGISTRATION_FORM)

    assert result == {"status": "error", "error": "Email already in use\nPassword is too weak"}


def test_api_error_maps_to_server_message(fake_api):
    fake_api.respond("RegisterCustomer", StorefrontAPIError(status_code=503, reason="Service Unavailable"))

    result = register_customer(REGISTRATION_FORM)

    assert result["status"] == "error"
    assert result["error"].startswith("Looks like we are experiencing a server error")


def test_transport_error_maps_to_generic_message(fake_api):
    fake_api.respond("RegisterCustomer", requests.ConnectionError("boom"))

    result = register_customer(REGISTRATION_FORM)

    assert result == {"status": "error", "error": "Something went wrong. Please try again later."}


def test_malformed_response_maps_to_generic_message(fake_api):
    fake_api.respond("RegisterCustomer", {"data": None, "errors": [{"message": "Syntax error"}]})

    result = register_customer(REGISTRATION_FORM)

    assert result["error"] == "Something went wrong. Please try again later."
