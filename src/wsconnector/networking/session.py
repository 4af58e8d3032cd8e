"""requests adapter exposing a ConnectorConfig to the transport layer.

Nothing here sends a request. The transport takes the session, timeout
and proxies built from the configuration and drives the exchange itself.
"""

from __future__ import annotations

import requests

from .config import ConnectorConfig


def _seconds(milliseconds: int) -> float | None:
    if milliseconds <= 0:
        return None
    return milliseconds / 1000.0


def request_timeout(
    config: ConnectorConfig,
) -> tuple[float | None, float | None]:
    """Resolve the (connect, read) timeout pair in seconds.

    A zero millisecond value maps to None, which requests treats as no
    timeout.
    """
    return (
        _seconds(config.connection_timeout),
        _seconds(config.read_timeout),
    )


def proxies_for(config: ConnectorConfig) -> dict[str, str]:
    """Return a requests ``proxies`` mapping, empty for a direct connection."""
    url = config.proxy.url(config.proxy_username, config.proxy_password)
    if url is None:
        return {}
    return {"http": url, "https": url}


def build_session(config: ConnectorConfig) -> requests.Session:
    """Create a requests Session carrying the connector's settings.

    Args:
        config: Configuration supplying headers, compression and proxy.

    Returns:
        A new session; the caller owns and closes it.
    """
    session = requests.Session()
    session.headers["Accept-Encoding"] = (
        "gzip" if config.compression else "identity"
    )
    session.headers.update(config.headers)
    proxies = proxies_for(config)
    if proxies:
        session.proxies.update(proxies)
        # Explicit proxy wins over *_PROXY environment variables.
        session.trust_env = False
    return session
