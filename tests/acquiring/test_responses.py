import pytest

from sberbank_acquiring import ActionException, ResponseParsingException
from sberbank_acquiring.infrastructure.external.acquiring.responses import (
    extract_error,
    normalize_response,
    parse_response,
)


def test_parse_response_returns_mapping():
    assert parse_response('{"orderId": "abc"}') == {"orderId": "abc"}


@pytest.mark.parametrize("raw", ["Malformed json!", "null", "[]", "true"])
def test_parse_response_rejects_non_objects(raw):
    with pytest.raises(ResponseParsingException) as exc_info:
        parse_response(raw)
    assert exc_info.value.response == raw


def test_code_priority_lower_case_first():
    data = {"errorCode": 1, "ErrorCode": 2, "error": {"code": 3, "message": "nested"}}
    assert extract_error(data) == (1, "nested")


def test_code_priority_capitalized_before_nested():
    data = {"ErrorCode": 2, "ErrorMessage": "capitalized", "error": {"code": 3, "message": "nested"}}
    assert extract_error(data) == (2, "capitalized")


def test_message_priority():
    data = {
        "errorCode": 1,
        "ErrorMessage": "capitalized",
        "error": {"message": "nested", "description": "description"},
    }
    assert extract_error(data) == (1, "capitalized")
    assert extract_error({"errorCode": 1, "error": {"description": "description"}}) == (1, "description")


def test_null_fields_are_skipped():
    data = {"errorCode": None, "ErrorCode": 7, "errorMessage": None, "ErrorMessage": "seven"}
    assert extract_error(data) == (7, "seven")


def test_non_mapping_error_field_is_ignored():
    assert extract_error({"error": "something odd"}) == (0, "Unknown error.")


def test_no_error_fields_means_success():
    assert extract_error({"orderStatus": 2}) == (0, "Unknown error.")


def test_non_numeric_code_is_a_parsing_error():
    with pytest.raises(ResponseParsingException):
        extract_error({"errorCode": "boom"}, raw='{"errorCode": "boom"}')


def test_bookkeeping_fields_stripped_on_success():
    data = {
        "errorCode": 0,
        "ErrorCode": 0,
        "errorMessage": "ok",
        "ErrorMessage": "ok",
        "error": {"code": 0},
        "success": True,
        "orderNumber": "42",
    }
    assert normalize_response(data) == {"orderNumber": "42"}


def test_action_exception_carries_code_message_and_action():
    with pytest.raises(ActionException) as exc_info:
        normalize_response({"error": {"code": "5", "message": "Access denied"}}, action="/rest/register.do")
    exc = exc_info.value
    assert exc.code == 5
    assert exc.message == "Access denied"
    assert exc.action == "/rest/register.do"
