"""Registry of header-source providers."""

from __future__ import annotations

import logging
from typing import Iterable, Type

from ..errors import InvalidPreferredProviderError, InvalidProviderError
from ..exclusion import ExclusionFilter
from .base import Provider
from .cloudflare import CloudflareProvider
from .generic import GenericProvider
from .qrator import QratorProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Holds one instance of every known provider, bound to one exclusion set.

    The declaration order of ``_known_providers`` is also the fallback
    order used when no preferred provider produced an address.
    """

    _known_providers: dict[str, Type[Provider]] = {
        GenericProvider.name: GenericProvider,
        CloudflareProvider.name: CloudflareProvider,
        QratorProvider.name: QratorProvider,
    }

    def __init__(self, exclusion: ExclusionFilter) -> None:
        self._exclusion = exclusion
        self._providers: dict[str, Provider] = {
            name: provider_cls(exclusion)
            for name, provider_cls in self._known_providers.items()
        }

    @classmethod
    def initialize(
        cls,
        excluded_networks: Iterable[str] = (),
        excluded_addresses: Iterable[str] = (),
    ) -> ProviderRegistry:
        """Build the exclusion filter and a registry sharing it.

        Raises:
            InvalidNetworkError: if an excluded network is malformed.
        """
        return cls(ExclusionFilter(excluded_networks, excluded_addresses))

    @property
    def exclusion(self) -> ExclusionFilter:
        return self._exclusion

    def available_providers(self) -> list[str]:
        """Return every known provider name in declaration order."""
        return list(self._providers)

    def is_valid_provider(self, name: str) -> bool:
        return name in self._providers

    def get(self, name: str) -> Provider:
        """Return the provider called ``name``.

        Raises:
            InvalidProviderError: if ``name`` is not a known provider.
        """
        try:
            return self._providers[name]
        except KeyError:
            raise InvalidProviderError(name, self.available_providers()) from None

    def enabled_providers(self, requested: Iterable[str] = ()) -> dict[str, Provider]:
        """Return the providers to consult, keyed by name in declaration order.

        An empty request enables everything.  Otherwise only the requested
        providers are enabled, plus ``generic`` which is always on.

        Raises:
            InvalidProviderError: if any requested name is unknown.
        """
        requested = list(requested)
        for name in requested:
            if not self.is_valid_provider(name):
                raise InvalidProviderError(name, self.available_providers())

        if not requested:
            return dict(self._providers)

        wanted = set(requested) | {GenericProvider.name}
        return {
            name: provider
            for name, provider in self._providers.items()
            if name in wanted
        }

    def validate_preferred_provider(self, name: str) -> bool:
        """Check the preferred provider name; ``""`` means no preference.

        Raises:
            InvalidPreferredProviderError: if ``name`` is set but unknown.
        """
        if name and not self.is_valid_provider(name):
            raise InvalidPreferredProviderError(name, self.available_providers())
        return True
