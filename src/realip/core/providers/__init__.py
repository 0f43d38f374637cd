"""Header-source providers.

Three variants share the ``Provider`` interface:

* ``generic``: ``X-Real-Ip``, then the ``X-Forwarded-For`` chain.
* ``cloudflare``: ``True-Client-IP``, then ``CF-Connecting-IP``.
* ``qrator``: ``X-Qrator-IP-Source``.

``ProviderRegistry`` binds all of them to a shared ``ExclusionFilter``.
"""

from .base import HeaderMapping, Provider
from .cloudflare import CloudflareProvider
from .generic import GenericProvider
from .qrator import QratorProvider
from .registry import ProviderRegistry

__all__ = [
    "CloudflareProvider",
    "GenericProvider",
    "HeaderMapping",
    "Provider",
    "ProviderRegistry",
    "QratorProvider",
]
