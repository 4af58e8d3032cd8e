"""Configuration model for SOAP connectors.

A ``ConnectorConfig`` is built once per client session, adjusted during
setup, then read by the transport for the requests it issues. It does not
synchronize its own state.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType, TracebackType
from typing import Iterator, Mapping, TextIO

import structlog

from .errors import ConfigurationError, InvalidEndpointError
from .handlers import MessageHandler
from .proxy import NO_PROXY, ProxyDescriptor
from .shared import NTLM_DOMAIN, PROCESS_SETTINGS, SharedSettings
from .trace import TraceSink

logger = structlog.get_logger(__name__)

PARTNER_FRAGMENT = "/services/Soap/u/"
ENTERPRISE_FRAGMENT = "/services/Soap/c/"

_NON_NEGATIVE = frozenset(
    {
        "read_timeout",
        "connection_timeout",
        "max_request_size",
        "max_response_size",
    }
)


def _process_settings() -> SharedSettings:
    return PROCESS_SETTINGS


@dataclass(eq=False)
class ConnectorConfig:
    """Connection parameters and behavior flags for a SOAP connector.

    Timeouts are in milliseconds and size limits in bytes; 0 disables
    either.
    """

    username: str | None = None
    password: str | None = None
    session_id: str | None = None
    read_timeout: int = 0
    connection_timeout: int = 0
    trace_message: bool = False
    compression: bool = True
    pretty_print_xml: bool = False
    manual_login: bool = False
    use_chunked_post: bool = False
    validate_schema: bool = True
    proxy_username: str | None = None
    proxy_password: str | None = None
    max_request_size: int = 0
    max_response_size: int = 0
    shared: SharedSettings = field(default_factory=_process_settings, repr=False)

    _service_endpoint: str | None = field(default=None, init=False, repr=False)
    _auth_endpoint: str | None = field(default=None, init=False, repr=False)
    _headers: dict[str, str] = field(default_factory=dict, init=False, repr=False)
    _proxy: ProxyDescriptor = field(default=NO_PROXY, init=False, repr=False)
    _trace_file: Path | None = field(default=None, init=False, repr=False)
    _trace_sink: TraceSink | None = field(default=None, init=False, repr=False)
    _handlers: list[MessageHandler] = field(
        default_factory=list, init=False, repr=False
    )

    def __setattr__(self, name: str, value: object) -> None:
        # Runs for constructor arguments and later assignment alike.
        if name in _NON_NEGATIVE and value < 0:  # type: ignore[operator]
            raise ValueError(f"{name} must be >= 0")
        super().__setattr__(name, value)

    # Endpoints

    @property
    def service_endpoint(self) -> str | None:
        return self._service_endpoint

    def set_service_endpoint(self, value: str | None) -> None:
        if not value:
            raise InvalidEndpointError("service endpoint", value)
        self._service_endpoint = value

    @property
    def auth_endpoint(self) -> str | None:
        return self._auth_endpoint

    def set_auth_endpoint(self, value: str | None) -> None:
        if not value:
            raise InvalidEndpointError("auth endpoint", value)
        self._auth_endpoint = value

    def verify_endpoint(self, fragment: str) -> None:
        """Check that every configured endpoint contains ``fragment``.

        Unset endpoints are skipped. No other URL validation is done.

        Raises:
            ConfigurationError: naming the first endpoint that lacks the
                fragment, auth endpoint first.
        """
        if (
            self._auth_endpoint is not None
            and fragment not in self._auth_endpoint
        ):
            raise ConfigurationError(
                "auth_endpoint", fragment, self._auth_endpoint
            )
        if (
            self._service_endpoint is not None
            and fragment not in self._service_endpoint
        ):
            raise ConfigurationError(
                "service_endpoint", fragment, self._service_endpoint
            )

    def verify_partner_endpoint(self) -> None:
        self.verify_endpoint(PARTNER_FRAGMENT)

    def verify_enterprise_endpoint(self) -> None:
        self.verify_endpoint(ENTERPRISE_FRAGMENT)

    # Headers

    @property
    def headers(self) -> Mapping[str, str]:
        """Read-only snapshot of the extra request headers."""
        return MappingProxyType(dict(self._headers))

    def get_request_header(self, key: str) -> str | None:
        return self._headers.get(key)

    def set_request_header(self, key: str, value: str) -> None:
        self._headers[key] = value

    # Proxy

    @property
    def proxy(self) -> ProxyDescriptor:
        return self._proxy

    def set_proxy(self, host: str, port: int) -> None:
        self._proxy = ProxyDescriptor.http(host, port)

    # Tracing

    @property
    def trace_file(self) -> Path | None:
        return self._trace_file

    def set_trace_file(self, path: str | Path) -> None:
        """Send trace output to ``path``, appending if the file exists.

        Any sink opened by an earlier call is closed first.

        Raises:
            OSError: if the file cannot be opened for append.
        """
        path = Path(path)
        existed = path.exists()
        sink = TraceSink(path)
        if existed:
            logger.info("trace_file_exists_appending", path=str(path))
        self.close()
        self._trace_file = path
        self._trace_sink = sink

    @property
    def trace_stream(self) -> TraceSink | TextIO:
        if self._trace_sink is None:
            return sys.stdout
        return self._trace_sink

    def close(self) -> None:
        """Release the trace sink, if one is open, and forget its path."""
        if self._trace_sink is not None:
            self._trace_sink.close()
            self._trace_sink = None
        self._trace_file = None

    def __enter__(self) -> ConnectorConfig:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # Message handlers

    def add_message_handler(self, handler: MessageHandler) -> None:
        self._handlers.append(handler)

    def message_handlers(self) -> Iterator[MessageHandler]:
        """Iterate the registered handlers in insertion order.

        The iterator runs over a snapshot taken at call time.
        """
        return iter(tuple(self._handlers))

    def has_message_handlers(self) -> bool:
        return bool(self._handlers)

    def clear_message_handlers(self) -> None:
        self._handlers.clear()

    # NTLM

    @property
    def ntlm_domain(self) -> str | None:
        return self.shared.get(NTLM_DOMAIN)

    def set_ntlm_domain(self, domain: str) -> None:
        """Record the NTLM domain in the shared settings, once.

        Later calls leave the first value in place.

        Raises:
            ValueError: if ``domain`` is None or empty.
        """
        if not domain:
            raise ValueError(f"illegal NTLM domain {domain!r}")
        if not self.shared.set_once(NTLM_DOMAIN, domain):
            logger.info(
                "ntlm_domain_already_set",
                current=self.shared.get(NTLM_DOMAIN),
                ignored=domain,
            )


DEFAULT = ConnectorConfig()
