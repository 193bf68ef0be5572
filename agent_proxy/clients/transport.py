# Copyright 2025 Loopper-AI
# Outbound transports for plain and TLS connections to the agent

from __future__ import annotations

import ssl
from dataclasses import dataclass

import httpx


class PlainTransport:
    """Plain-text HTTP transport."""

    scheme = "http"

    def open_client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.AsyncHTTPTransport(), timeout=timeout)


class SecureTransport:
    """HTTPS transport verifying against the default CA bundle."""

    scheme = "https"

    def __init__(self):
        self._ssl_ctx = ssl.create_default_context()

    def open_client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.AsyncHTTPTransport(verify=self._ssl_ctx), timeout=timeout)


Transport = PlainTransport | SecureTransport

_TRANSPORTS = {
    "http": PlainTransport,
    "https": SecureTransport,
}


@dataclass(frozen=True)
class Target:
    """Absolute request URL and the transport that reaches it."""

    url: httpx.URL
    transport: Transport


def resolve_target(base_url: str, path: str) -> Target:
    """Join path onto base_url and pick the transport for the resulting scheme.

    An absolute path replaces the base entirely, matching browser URL resolution.
    Raises ValueError for non-string paths and schemes other than http/https.
    """
    if not isinstance(path, str):
        raise ValueError(f"Invalid path: {path!r}")

    url = httpx.URL(base_url).join(path)
    transport_cls = _TRANSPORTS.get(url.scheme)
    if transport_cls is None or not url.host:
        raise ValueError(f"Invalid URL: {url}")

    return Target(url=url, transport=transport_cls())
