# pyright: reportUnknownMemberType=false
from unittest.mock import patch

import pytest
from urllib3.util import parse_url

from wsconnector.networking.config import ConnectorConfig
from wsconnector.networking.session import (
    build_session,
    proxies_for,
    request_timeout,
)
from wsconnector.networking.shared import SharedSettings


@pytest.fixture
def config():
    return ConnectorConfig(shared=SharedSettings())


def test_request_timeout_converts_milliseconds(config):
    config.connection_timeout = 1500
    config.read_timeout = 30000

    assert request_timeout(config) == (1.5, 30.0)


def test_request_timeout_zero_means_no_timeout(config):
    assert request_timeout(config) == (None, None)


def test_proxies_empty_without_proxy(config):
    assert proxies_for(config) == {}


def test_proxies_include_credentials(config):
    config.set_proxy("proxy.local", 3128)
    config.proxy_username = "bob"
    config.proxy_password = "pw"

    assert proxies_for(config) == {
        "http": "http://bob:pw@proxy.local:3128",
        "https": "http://bob:pw@proxy.local:3128",
    }


def test_build_session_applies_headers_and_compression(config):
    config.set_request_header("Sforce-Call-Options", "client=test")

    session = build_session(config)

    assert session.headers["Accept-Encoding"] == "gzip"
    assert session.headers["Sforce-Call-Options"] == "client=test"
    assert session.proxies == {}
    assert session.trust_env is True


def test_build_session_without_compression(config):
    config.compression = False

    session = build_session(config)

    assert session.headers["Accept-Encoding"] == "identity"


def test_build_session_applies_proxy(config):
    config.set_proxy("proxy.local", 3128)

    session = build_session(config)

    assert session.proxies["https"] == "http://proxy.local:3128"
    assert session.trust_env is False


@patch("requests.Session.request")
def test_build_session_sends_nothing(mock_request, config):
    build_session(config)

    mock_request.assert_not_called()


def test_negative_timeout_is_rejected_before_reaching_requests(config):
    config.read_timeout = 1000

    with pytest.raises(ValueError):
        config.read_timeout = -5

    assert request_timeout(config) == (None, 1.0)


def test_proxies_for_ipv6_proxy_parses_cleanly(config):
    config.set_proxy("::1", 3128)

    url = proxies_for(config)["http"]

    parsed = parse_url(url)
    assert parsed.host.strip("[]") == "::1"
    assert parsed.port == 3128
