"""Proxy descriptors handed to the transport layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote


class ProxyType(str, Enum):
    DIRECT = "direct"
    HTTP = "http"


@dataclass(frozen=True)
class ProxyDescriptor:
    """Address and scheme of a forward proxy, or a direct connection."""

    type: ProxyType = ProxyType.DIRECT
    host: str | None = None
    port: int | None = None

    def __post_init__(self) -> None:
        if self.type is ProxyType.DIRECT:
            return
        if not self.host:
            raise ValueError("proxy host must be non-empty")
        if self.port is None or not 0 <= self.port <= 65535:
            raise ValueError(f"proxy port out of range: {self.port}")

    @classmethod
    def http(cls, host: str, port: int) -> ProxyDescriptor:
        return cls(type=ProxyType.HTTP, host=host, port=port)

    def url(
        self, username: str | None = None, password: str | None = None
    ) -> str | None:
        """Render the proxy as a URL, or None for a direct connection.

        Args:
            username: Optional proxy user, percent-quoted into the URL.
            password: Optional proxy password, only used with a username.

        Returns:
            ``http://[user[:password]@]host:port`` or None.
        """
        if self.type is ProxyType.DIRECT:
            return None
        credentials = ""
        if username:
            credentials = quote(username, safe="")
            if password:
                credentials += ":" + quote(password, safe="")
            credentials += "@"
        host = self.host or ""
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"http://{credentials}{host}:{self.port}"


NO_PROXY = ProxyDescriptor()
