"""Process-wide settings shared between configuration instances."""

from __future__ import annotations

from threading import Lock
from typing import Any

NTLM_DOMAIN = "http.auth.ntlm.domain"


class SharedSettings:
    """Key/value store whose entries can be written at most once."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._values: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def set_once(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key`` unless it is already set.

        Returns:
            True if the value was stored, False if the key was taken.
        """
        with self._lock:
            if self._values.get(key) is not None:
                return False
            self._values[key] = value
            return True


PROCESS_SETTINGS = SharedSettings()
