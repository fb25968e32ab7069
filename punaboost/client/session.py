"""
Client-side credential storage.

The client keeps two string entries, "token" and "user" (JSON), in a
mapping supplied by the caller: a dict in tests, a persistent store in
long-running tools.
"""
import json
import logging
from typing import Any, Dict, MutableMapping, Optional

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class SessionState:
    def __init__(self, storage: Optional[MutableMapping[str, str]] = None):
        self.storage = storage if storage is not None else {}

    @property
    def token(self) -> Optional[str]:
        return self.storage.get(TOKEN_KEY) or None

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        raw = self.storage.get(USER_KEY)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Stored user is not valid JSON; ignoring it")
            return None

    @property
    def has_token(self) -> bool:
        return self.token is not None

    def set_credentials(self, token: str, user: Dict[str, Any]) -> None:
        self.storage[TOKEN_KEY] = token
        self.storage[USER_KEY] = json.dumps(user)

    def set_user(self, user: Dict[str, Any]) -> None:
        self.storage[USER_KEY] = json.dumps(user)

    def clear(self) -> None:
        self.storage.pop(TOKEN_KEY, None)
        self.storage.pop(USER_KEY, None)
