"""Tests for provider registration and validation."""

import pytest

from realip.core.errors import (
    InvalidNetworkError,
    InvalidPreferredProviderError,
    InvalidProviderError,
)
from realip.core.exclusion import ExclusionFilter
from realip.core.providers import (
    CloudflareProvider,
    GenericProvider,
    ProviderRegistry,
    QratorProvider,
)


@pytest.fixture
def registry() -> ProviderRegistry:
    return ProviderRegistry.initialize(["10.0.0.0/8"], ["192.168.1.1"])


class TestInitialize:
    def test_all_providers_share_exclusion(self, registry):
        for name in registry.available_providers():
            assert registry.get(name).exclusion is registry.exclusion

    def test_available_in_declared_order(self, registry):
        assert registry.available_providers() == ["generic", "cloudflare", "qrator"]

    def test_invalid_network(self):
        with pytest.raises(InvalidNetworkError):
            ProviderRegistry.initialize(["invalid"], [])

    def test_wraps_existing_filter(self):
        exclusion = ExclusionFilter()
        assert ProviderRegistry(exclusion).exclusion is exclusion


class TestLookup:
    def test_is_valid_provider(self, registry):
        assert registry.is_valid_provider("generic")
        assert registry.is_valid_provider("cloudflare")
        assert registry.is_valid_provider("qrator")
        assert not registry.is_valid_provider("invalid")
        assert not registry.is_valid_provider("Generic")
        assert not registry.is_valid_provider("")

    def test_get(self, registry):
        assert isinstance(registry.get("generic"), GenericProvider)
        assert isinstance(registry.get("cloudflare"), CloudflareProvider)
        assert isinstance(registry.get("qrator"), QratorProvider)

    def test_get_unknown(self, registry):
        with pytest.raises(InvalidProviderError) as exc_info:
            registry.get("akamai")
        assert exc_info.value.provider == "akamai"


class TestEnabledProviders:
    def test_empty_enables_all(self, registry):
        assert list(registry.enabled_providers([])) == ["generic", "cloudflare", "qrator"]

    def test_generic_always_enabled(self, registry):
        assert list(registry.enabled_providers(["qrator"])) == ["generic", "qrator"]

    def test_order_independent_of_request(self, registry):
        enabled = registry.enabled_providers(["qrator", "cloudflare"])
        assert list(enabled) == ["generic", "cloudflare", "qrator"]

    def test_generic_only(self, registry):
        assert list(registry.enabled_providers(["generic"])) == ["generic"]

    def test_returns_shared_instances(self, registry):
        assert registry.enabled_providers()["generic"] is registry.get("generic")

    def test_invalid_name(self, registry):
        with pytest.raises(InvalidProviderError, match="provider invalid is not valid") as exc_info:
            registry.enabled_providers(["cloudflare", "invalid"])
        assert exc_info.value.supported == ("generic", "cloudflare", "qrator")


class TestValidatePreferredProvider:
    @pytest.mark.parametrize("name", ["", "generic", "cloudflare", "qrator"])
    def test_valid(self, registry, name):
        assert registry.validate_preferred_provider(name) is True

    def test_invalid(self, registry):
        with pytest.raises(InvalidPreferredProviderError, match="preferred provider invalid"):
            registry.validate_preferred_provider("invalid")
