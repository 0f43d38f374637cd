"""End-to-end tests through the FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from realip.app import build_resolver, create_app
from realip.configs.config import AppConfig
from realip.configs.system import RealIPConfig
from realip.core.errors import InvalidPreferredProviderError, InvalidProviderError


def _client(**kwargs) -> TestClient:
    return TestClient(create_app(AppConfig(real_ip=RealIPConfig(**kwargs))))


class TestCreateApp:
    def test_invalid_provider_fails_at_startup(self):
        with pytest.raises(InvalidProviderError):
            create_app(AppConfig(real_ip=RealIPConfig(providers=["invalid"])))

    def test_invalid_preferred_provider_fails_at_startup(self):
        with pytest.raises(InvalidPreferredProviderError):
            create_app(AppConfig(real_ip=RealIPConfig(preferred_provider="invalid")))

    def test_health(self):
        with _client() as client:
            assert client.get("/health").json() == {"status": "ok"}


class TestClientIPEndpoint:
    def test_preferred_cloudflare(self):
        with _client(preferred_provider="cloudflare") as client:
            response = client.get(
                "/ip",
                headers={
                    "X-Forwarded-For": "10.0.0.20",
                    "X-Real-Ip": "10.0.0.20",
                    "True-Client-IP": "10.0.0.40",
                },
            )
        body = response.json()
        assert response.status_code == 200
        assert body["ip"] == "10.0.0.40"
        assert body["x_real_ip"] == "10.0.0.40"
        assert body["x_forwarded_for"] == "10.0.0.40"
        assert body["preferred_provider"] == "cloudflare"
        assert body["providers"] == ["generic", "cloudflare", "qrator"]

    def test_excluded_chain_falls_back_to_peer(self):
        with _client(excluded_networks=["127.0.0.1/24"]) as client:
            body = client.get("/ip", headers={"X-Forwarded-For": "127.0.0.2"}).json()
        assert body["ip"] == "testclient"
        assert body["x_real_ip"] is None
        assert body["x_forwarded_for"] == "127.0.0.2"

    def test_providers_restricted(self):
        with _client(providers=["qrator"]) as client:
            body = client.get("/ip", headers={"CF-Connecting-IP": "10.0.0.40"}).json()
        assert body["providers"] == ["generic", "qrator"]
        assert body["x_real_ip"] is None


class TestUntrustedRealIPHeader:
    @pytest.mark.parametrize("value", ["10.0.0.1", "not-an-ip", "fe80::1%eth0"])
    def test_untrusted_x_real_ip_falls_back_to_peer(self, value):
        with _client(excluded_networks=["10.0.0.0/8"]) as client:
            body = client.get("/ip", headers={"X-Real-Ip": value}).json()
        assert body["ip"] == "testclient"
        assert body["x_real_ip"] == value

    def test_trusted_x_real_ip_is_reported(self):
        with _client(excluded_networks=["10.0.0.0/8"]) as client:
            body = client.get("/ip", headers={"X-Real-Ip": "203.0.113.7"}).json()
        assert body["ip"] == "203.0.113.7"


class TestBuildResolver:
    def test_uses_every_config_field(self):
        resolver = build_resolver(
            RealIPConfig(
                excluded_networks=["10.0.0.0/8"],
                excluded_addresses=["1.1.1.1"],
                providers=["qrator"],
                preferred_provider="qrator",
            )
        )
        assert list(resolver.enabled_providers) == ["generic", "qrator"]
        assert resolver.preferred_provider == "qrator"
        assert resolver.registry.exclusion.is_excluded("10.1.1.1")
        assert resolver.registry.exclusion.is_excluded("1.1.1.1")
