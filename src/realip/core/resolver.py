"""Per-request address resolution across the enabled providers."""

from __future__ import annotations

import logging
from typing import Iterable, MutableMapping

from .providers import HeaderMapping, Provider, ProviderRegistry
from .providers.generic import X_FORWARDED_FOR_HEADER, X_REAL_IP_HEADER

logger = logging.getLogger(__name__)

NORMALIZED_HEADERS = (X_FORWARDED_FOR_HEADER, X_REAL_IP_HEADER)


class RealIPResolver:
    """Picks one client address per request.

    Precedence:

    1. The preferred provider's address, when it is enabled and found one.
    2. Otherwise the first non-empty result in registry order
       (``generic``, ``cloudflare``, ``qrator``).

    All validation happens here in ``__init__``; ``resolve`` never raises.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        providers: Iterable[str] = (),
        preferred_provider: str = "",
    ) -> None:
        registry.validate_preferred_provider(preferred_provider)
        self._registry = registry
        self._enabled = registry.enabled_providers(providers)
        self._preferred = preferred_provider

        if preferred_provider and preferred_provider not in self._enabled:
            logger.warning(
                "Preferred provider %s is not enabled (enabled: %s)",
                preferred_provider,
                ", ".join(self._enabled),
            )

        logger.info(
            "RealIPResolver: providers=%s, preferred=%s, %r",
            ", ".join(self._enabled),
            preferred_provider or "-",
            registry.exclusion,
        )

    @classmethod
    def create(
        cls,
        excluded_networks: Iterable[str] = (),
        excluded_addresses: Iterable[str] = (),
        providers: Iterable[str] = (),
        preferred_provider: str = "",
    ) -> RealIPResolver:
        """Build the exclusion filter, registry and resolver in one go.

        Raises:
            RealIPConfigError: on a malformed network or unknown provider.
        """
        registry = ProviderRegistry.initialize(excluded_networks, excluded_addresses)
        return cls(
            registry,
            providers=providers,
            preferred_provider=preferred_provider,
        )

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    @property
    def enabled_providers(self) -> dict[str, Provider]:
        return dict(self._enabled)

    @property
    def preferred_provider(self) -> str:
        return self._preferred

    def collect(self, headers: HeaderMapping) -> dict[str, str]:
        """Run every enabled provider; return the non-empty results by name."""
        results: dict[str, str] = {}
        for name, provider in self._enabled.items():
            address = provider.resolve(headers)
            if address:
                results[name] = address
        return results

    def resolve(self, headers: HeaderMapping) -> str:
        """Return the trusted client address, or ``""`` if none was found."""
        results = self.collect(headers)

        if self._preferred and self._preferred in results:
            address = results[self._preferred]
            logger.debug(
                "Resolved %s via preferred %s",
                address,
                self._preferred,
                extra={"client_ip": address, "provider": self._preferred},
            )
            return address

        for name, address in results.items():
            logger.debug(
                "Resolved %s via %s",
                address,
                name,
                extra={"client_ip": address, "provider": name},
            )
            return address

        return ""

    def apply(self, headers: MutableMapping[str, str]) -> str:
        """Resolve and, when found, overwrite the normalized headers in place."""
        address = self.resolve(headers)
        if address:
            for header in NORMALIZED_HEADERS:
                headers[header] = address
        return address
