"""Configuration errors raised while building the resolver.

All of them are construction-time failures: once a ``RealIPResolver``
exists, resolving a request never raises.
"""

from __future__ import annotations

from typing import Sequence


class RealIPConfigError(ValueError):
    """Base class for invalid real-IP configuration."""


class InvalidNetworkError(RealIPConfigError):
    """Raised when an excluded network is not a valid CIDR block."""

    def __init__(self, value: str) -> None:
        super().__init__(f"excluded network {value!r} is not a valid CIDR")
        self.value = value


class InvalidProviderError(RealIPConfigError):
    """Raised when an unknown provider name is requested."""

    def __init__(self, provider: str, supported: Sequence[str]) -> None:
        super().__init__(
            f"provider {provider} is not valid, only the following ones "
            f"are supported: {', '.join(supported)}"
        )
        self.provider = provider
        self.supported = tuple(supported)


class InvalidPreferredProviderError(RealIPConfigError):
    """Raised when the preferred provider is not a known provider name."""

    def __init__(self, provider: str, supported: Sequence[str]) -> None:
        super().__init__(
            f"preferred provider {provider} is not valid, only the following "
            f"ones are supported: {', '.join(supported)}"
        )
        self.provider = provider
        self.supported = tuple(supported)
