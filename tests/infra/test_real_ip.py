"""Tests for the ``get_real_ip`` dependency."""

from __future__ import annotations

from unittest.mock import MagicMock

from starlette.datastructures import State

from realip.infra.real_ip import get_real_ip


class _FakeRequest:
    """Minimal stand-in for ``fastapi.Request``."""

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        client_host: str | None = None,
        real_ip: str | None = None,
    ) -> None:
        self.headers = headers or {}
        self.client = MagicMock(host=client_host) if client_host else None
        self.state = State({} if real_ip is None else {"real_ip": real_ip})


class TestGetRealIP:
    def test_resolved_address_preferred(self):
        req = _FakeRequest(real_ip="5.6.7.8", client_host="10.0.0.1")
        assert get_real_ip(req) == "5.6.7.8"

    def test_header_alone_is_not_trusted(self):
        req = _FakeRequest(headers={"x-real-ip": "5.6.7.8"}, client_host="10.0.0.1")
        assert get_real_ip(req) == "10.0.0.1"

    def test_empty_resolution_falls_back_to_client_host(self):
        req = _FakeRequest(
            headers={"x-real-ip": "not-an-ip"}, client_host="10.0.0.1", real_ip=""
        )
        assert get_real_ip(req) == "10.0.0.1"

    def test_client_host_fallback(self):
        req = _FakeRequest(client_host="10.0.0.1")
        assert get_real_ip(req) == "10.0.0.1"

    def test_no_client_returns_unknown(self):
        assert get_real_ip(_FakeRequest()) == "unknown"
