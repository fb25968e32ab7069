"""
Error payload interpretation for API responses.

The server (and proxies in front of it) may answer with a plain string, a
list of identity-style errors, a {"message"} object, an {"error"} object or
a validation problem document with "errors" and "title". extract_error_message
turns any of these into text for the user.
"""
from typing import Any, List, Optional, Union

import requests

DEFAULT_ERROR_MESSAGE = "An error occurred"

# ApiError.kind
HTTP_ERROR = "http"
NETWORK_ERROR = "network"
SETUP_ERROR = "setup"


def _from_list(data: list) -> List[str]:
    messages = []
    for item in data:
        if isinstance(item, dict) and item.get("description"):
            messages.append(item["description"])
        elif isinstance(item, str):
            messages.append(item)
    return messages


def _from_error_field(error: Any) -> str:
    if isinstance(error, str):
        return error
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return str(error)


def _present(value: Any) -> bool:
    """Whether a payload field counts as set: empty containers do, empty strings and zero do not."""
    if value is None or value is False:
        return False
    if isinstance(value, (str, int, float)):
        return bool(value) and value == value
    return True


def _from_errors_field(errors: Union[dict, list]) -> str:
    values = errors.values() if isinstance(errors, dict) else errors
    messages = []
    for value in values:
        if isinstance(value, list):
            messages.extend(str(item) for item in value)
        else:
            messages.append(str(value))
    return ", ".join(messages)


def extract_error_message(data: Any) -> Union[str, List[str]]:
    """
    Best user-facing message(s) for an error payload; first matching rule wins.

    Returns a list only for lists of identity-style errors, where every entry
    is shown separately.
    """
    if isinstance(data, str):
        return data

    if isinstance(data, list) and data:
        messages = _from_list(data)
        if messages:
            return messages

    if isinstance(data, dict):
        if data.get("message"):
            return data["message"]

        if _present(data.get("error")):
            return _from_error_field(data["error"])

        errors = data.get("errors")
        if isinstance(errors, (dict, list)):
            joined = _from_errors_field(errors)
            if joined:
                return joined

        if data.get("title"):
            return data["title"]

    return DEFAULT_ERROR_MESSAGE


class ApiError(Exception):
    """
    A failed API call.

    kind is HTTP_ERROR when the server answered (status/data are set),
    NETWORK_ERROR when no response arrived, and SETUP_ERROR when the request
    could not even be built. original holds the underlying exception, if any.
    """

    def __init__(
        self,
        kind: str,
        url: str,
        status: Optional[int] = None,
        data: Any = None,
        response: Optional[requests.Response] = None,
        original: Optional[BaseException] = None,
    ):
        self.kind = kind
        self.url = url
        self.status = status
        self.data = data
        self.response = response
        self.original = original
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind == HTTP_ERROR:
            return f"HTTP {self.status} for {self.url}"
        if self.original is not None:
            return f"{self.kind} error for {self.url}: {self.original}"
        return f"{self.kind} error for {self.url}"
