import pytest

from storefront.app.common.errors import ApiError, abort_json, error_payload


def test_error_payload_shape():
    assert error_payload("not_found", "Missing", "rid-1") == {
        "error": {"code": "not_found", "message": "Missing", "details": {}, "request_id": "rid-1"}
    }


def test_api_error_uses_same_shape():
    err = ApiError(status_code=409, code="conflict", message="Taken", details={"field": "email"})
    assert err.to_dict("rid-2") == error_payload("conflict", "Taken", "rid-2", {"field": "email"})


def test_abort_json_raises():
    with pytest.raises(ApiError) as excinfo:
        abort_json(401, "unauthorized", "Authentication required")
    assert excinfo.value.status_code == 401
