"""
Extraction of user-facing messages from heterogeneous error payloads.
"""
import pytest

from punaboost.client.errors import DEFAULT_ERROR_MESSAGE, extract_error_message


def test_plain_string_is_returned_verbatim():
    assert extract_error_message("Email already exists.") == "Email already exists."


def test_empty_string_is_returned_as_is():
    assert extract_error_message("") == ""


def test_identity_style_list_yields_every_description():
    data = [{"code": "PasswordTooShort", "description": "A"}, "B", {"code": "NoDescription"}, 42]

    assert extract_error_message(data) == ["A", "B"]


def test_list_without_usable_items_falls_back():
    assert extract_error_message([{"code": "X"}]) == DEFAULT_ERROR_MESSAGE
    assert extract_error_message([]) == DEFAULT_ERROR_MESSAGE


def test_message_wins_over_errors():
    data = {"message": "Job not found", "errors": {"id": ["bad"]}, "title": "Problem"}

    assert extract_error_message(data) == "Job not found"


@pytest.mark.parametrize("error, expected", [
    ("Token expired", "Token expired"),
    ({"message": "Nested failure"}, "Nested failure"),
    ({"code": 17}, "{'code': 17}"),
    (404, "404"),
])
def test_error_field(error, expected):
    assert extract_error_message({"error": error}) == expected


def test_validation_errors_are_flattened_and_joined():
    data = {"errors": {"email": ["required"], "age": "invalid"}}

    assert extract_error_message(data) == "required, invalid"


def test_validation_errors_with_several_messages_per_field():
    data = {"title": "One or more validation errors occurred.", "errors": {"Password": ["too short", "needs a digit"]}}

    assert extract_error_message(data) == "too short, needs a digit"


def test_empty_errors_fall_through_to_title():
    data = {"title": "One or more validation errors occurred.", "errors": {}}

    assert extract_error_message(data) == "One or more validation errors occurred."


def test_falsy_message_is_skipped():
    assert extract_error_message({"message": "", "title": "Bad Request"}) == "Bad Request"


@pytest.mark.parametrize("data", [None, 42, {}, {"status": 500}])
def test_unrecognised_payload_falls_back(data):
    assert extract_error_message(data) == DEFAULT_ERROR_MESSAGE


@pytest.mark.parametrize("error, expected", [
    ({}, "{}"),
    ([], "[]"),
    ("", DEFAULT_ERROR_MESSAGE),
    (0, DEFAULT_ERROR_MESSAGE),
    (None, DEFAULT_ERROR_MESSAGE),
])
def test_empty_error_containers_still_count(error, expected):
    assert extract_error_message({"error": error}) == expected


def test_errors_given_as_list_are_joined():
    data = {"errors": [["Name is required"], "Code is too long"], "title": "Problem"}

    assert extract_error_message(data) == "Name is required, Code is too long"


def test_empty_errors_list_falls_through_to_title():
    assert extract_error_message({"errors": [], "title": "Problem"}) == "Problem"
