"""Client IP resolution engine.

``ExclusionFilter`` decides which addresses are untrusted, providers read
candidates from their headers, and ``RealIPResolver`` applies precedence
across the enabled providers.
"""

from .errors import (
    InvalidNetworkError,
    InvalidPreferredProviderError,
    InvalidProviderError,
    RealIPConfigError,
)
from .exclusion import ExclusionFilter
from .providers import (
    CloudflareProvider,
    GenericProvider,
    Provider,
    ProviderRegistry,
    QratorProvider,
)
from .resolver import RealIPResolver

__all__ = [
    "CloudflareProvider",
    "ExclusionFilter",
    "GenericProvider",
    "InvalidNetworkError",
    "InvalidPreferredProviderError",
    "InvalidProviderError",
    "Provider",
    "ProviderRegistry",
    "QratorProvider",
    "RealIPConfigError",
    "RealIPResolver",
]
