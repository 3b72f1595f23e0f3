import httpx
import pytest

from buildinghub.client.errors import (
    ApiError,
    Conflict,
    Forbidden,
    InvalidTransition,
    NotFound,
    Unauthenticated,
    error_from_response,
)


def error_response(status_code, code, message="boom"):
    return httpx.Response(status_code, json={"error": {"code": code, "message": message}})


@pytest.mark.parametrize(
    "status_code, code, expected",
    [
        (401, "UNAUTHENTICATED", Unauthenticated),
        (401, "INVALID_TOKEN", Unauthenticated),
        (403, "INSUFFICIENT_ROLE", Forbidden),
        (404, "MEMBERSHIP_NOT_FOUND", NotFound),
        (404, "BUILDING_NOT_FOUND", NotFound),
        (404, "UNIT_NOT_FOUND", NotFound),
        (409, "MEMBERSHIP_ALREADY_EXISTS", Conflict),
        (409, "INVALID_TRANSITION", InvalidTransition),
        (500, "INTERNAL_ERROR", ApiError),
    ],
)
def test_error_class_by_code(status_code, code, expected):
    error = error_from_response(error_response(status_code, code, "details here"))

    assert type(error) is expected
    assert error.code == code
    assert error.message == "details here"
    assert error.status_code == status_code


def test_invalid_transition_is_not_plain_conflict():
    error = error_from_response(error_response(409, "INVALID_TRANSITION"))

    assert isinstance(error, InvalidTransition)
    assert not isinstance(error, Conflict)


def test_unknown_code_falls_back_to_status():
    error = error_from_response(error_response(403, "SOMETHING_NEW"))

    assert isinstance(error, Forbidden)
    assert error.code == "SOMETHING_NEW"


def test_validation_detail():
    response = httpx.Response(
        422, json={"detail": [{"loc": ["body", "unit_id"], "msg": "field required"}]}
    )

    error = error_from_response(response)

    assert type(error) is ApiError
    assert error.code == "VALIDATION_ERROR"
    assert "unit_id" in error.message


def test_non_json_body():
    error = error_from_response(httpx.Response(502, text="Bad Gateway"))

    assert type(error) is ApiError
    assert error.code == "HTTP_502"
