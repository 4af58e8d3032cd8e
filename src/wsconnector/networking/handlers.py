"""Callback interface for observers of raw SOAP messages."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageHandler(Protocol):
    """Observer invoked by the transport around each request/response.

    The configuration only stores and orders handlers; calling them is the
    transport's job.
    """

    def handle_request(self, endpoint: str, request: bytes) -> None: ...

    def handle_response(self, endpoint: str, response: bytes) -> None: ...
