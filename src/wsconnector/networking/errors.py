"""Error types raised by the connector configuration."""

from __future__ import annotations


class ConnectorError(Exception):
    """Base class for all connector errors."""


class InvalidEndpointError(ConnectorError, ValueError):
    """Raised when an endpoint is set to None or an empty string."""

    def __init__(self, field: str, value: str | None) -> None:
        self.field = field
        self.value = value
        super().__init__(f"illegal {field} {value!r}")


class ConfigurationError(ConnectorError):
    """Raised when a configured endpoint does not match the API flavor."""

    def __init__(self, field: str, required_fragment: str, value: str) -> None:
        self.field = field
        self.required_fragment = required_fragment
        self.value = value
        super().__init__(
            f"Check {field}. It must contain '{required_fragment}'. "
            f"{field} specified {value}"
        )
