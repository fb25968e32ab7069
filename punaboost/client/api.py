"""
HTTP client for the PunaBoost API.

Every call goes through ApiClient.request, which attaches the bearer token,
runs failures through normalize_error (notifications, session expiry) and
returns an ApiResult. The original ApiError is always preserved so callers
can still react to it with unwrap().
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from punaboost.core import config
from punaboost.core.logging_config import sanitize_log_data
from punaboost.client.errors import (
    HTTP_ERROR,
    NETWORK_ERROR,
    SETUP_ERROR,
    ApiError,
    extract_error_message,
)
from punaboost.client.notifications import LoggingNotifier, Navigator, Notifier
from punaboost.client.session import SessionState

logger = logging.getLogger(__name__)

# ✅ Fallback messages
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials. Please check your email and password."
UNAUTHORIZED_MESSAGE = "Unauthorized. Please login."
SESSION_EXPIRED_MESSAGE = "Session expired. Please login again."
FORBIDDEN_MESSAGE = "You do not have permission to perform this action."
NOT_FOUND_MESSAGE = "Resource not found."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def is_login_request(url: str) -> bool:
    return "/account/login" in (url or "")


def is_enrichment_request(url: str) -> bool:
    """
    Background lookups used to decorate the stored user with a display name.

    A 401 here must not log the user out. Matching is by substring, so any
    URL containing both "/candidate" and "/all" qualifies.
    """
    url = url or ""
    return "/company/my-company" in url or ("/candidate" in url and "/all" in url)


def _notify(notifier: Notifier, message) -> None:
    if isinstance(message, list):
        for item in message:
            notifier.error(item)
    else:
        notifier.error(message)


def _handle_unauthorized(error: ApiError, session: SessionState, notifier: Notifier, navigator: Navigator) -> None:
    if is_login_request(error.url):
        _notify(notifier, extract_error_message(error.data) or INVALID_CREDENTIALS_MESSAGE)
        return

    if not session.has_token:
        _notify(notifier, extract_error_message(error.data) or UNAUTHORIZED_MESSAGE)
        return

    if is_enrichment_request(error.url):
        logger.debug(f"401 on enrichment request ignored: {error.url}")
        return

    session.clear()
    navigator.redirect_to_login()
    notifier.error(SESSION_EXPIRED_MESSAGE)
    logger.info("Session expired; credentials cleared")


def normalize_error(
    error: ApiError,
    session: SessionState,
    notifier: Notifier,
    navigator: Navigator,
) -> ApiError:
    """
    Apply the global reaction to a failed call and hand the error back unchanged.
    """
    if error.kind == NETWORK_ERROR:
        notifier.error(NETWORK_ERROR_MESSAGE)
        return error

    if error.kind == SETUP_ERROR:
        notifier.error(UNEXPECTED_ERROR_MESSAGE)
        return error

    status = error.status
    if status == 401:
        _handle_unauthorized(error, session, notifier, navigator)
    elif status == 403:
        _notify(notifier, extract_error_message(error.data) or FORBIDDEN_MESSAGE)
    elif status == 404:
        _notify(notifier, extract_error_message(error.data) or NOT_FOUND_MESSAGE)
    elif status is not None and status >= 500:
        _notify(notifier, extract_error_message(error.data) or SERVER_ERROR_MESSAGE)
    else:
        # 400 and any other status: whatever the payload says
        _notify(notifier, extract_error_message(error.data))

    return error


@dataclass
class ApiResult:
    data: Any = None
    error: Optional[ApiError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the payload, or re-raise the original ApiError."""
        if self.error is not None:
            raise self.error
        return self.data


def _response_data(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class ApiClient:
    def __init__(
        self,
        base_url: str = None,
        session_state: SessionState = None,
        notifier: Notifier = None,
        navigator: Navigator = None,
        http: requests.Session = None,
        timeout: float = None,
    ):
        self.base_url = (base_url or config.PUNABOOST_API_URL).rstrip("/")
        self.session_state = session_state if session_state is not None else SessionState()
        self.notifier = notifier or LoggingNotifier()
        self.navigator = navigator or Navigator()
        self.http = http or requests.Session()
        self.timeout = timeout if timeout is not None else config.CLIENT_TIMEOUT_SECONDS

    def url_for(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, is_json: bool) -> dict:
        headers = {"Accept": "application/json"}
        if is_json:
            headers["Content-Type"] = "application/json"
        token = self.session_state.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _fail(self, error: ApiError) -> ApiResult:
        normalize_error(error, self.session_state, self.notifier, self.navigator)
        return ApiResult(error=error)

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        data: Any = None,
        files: Any = None,
        params: Any = None,
    ) -> ApiResult:
        url = self.url_for(path)
        headers = self._headers(is_json=files is None and data is None)

        try:
            prepared = self.http.prepare_request(
                requests.Request(method, url, headers=headers, json=json, data=data, files=files, params=params)
            )
        except Exception as e:
            logger.error(f"Could not build request {method} {url}: {e}", exc_info=True)
            return self._fail(ApiError(SETUP_ERROR, url, original=e))

        logger.debug(f"{method} {url} headers={sanitize_log_data(dict(prepared.headers))}")

        try:
            response = self.http.send(prepared, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"No response for {method} {url}: {e}")
            return self._fail(ApiError(NETWORK_ERROR, url, original=e))

        payload = _response_data(response)
        if response.status_code >= 400:
            logger.info(f"{method} {url} failed with {response.status_code}")
            # An empty error body reads as "" so the status fallbacks apply
            data = payload if payload is not None else ""
            return self._fail(ApiError(HTTP_ERROR, url, status=response.status_code, data=data, response=response))

        return ApiResult(data=payload)

    def get(self, path: str, **kwargs) -> ApiResult:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> ApiResult:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> ApiResult:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> ApiResult:
        return self.request("DELETE", path, **kwargs)
