"""Cloudflare provider."""

from __future__ import annotations

from .base import HeaderMapping, Provider

TRUE_CLIENT_IP_HEADER = "True-Client-IP"
CF_CONNECTING_IP_HEADER = "CF-Connecting-IP"


class CloudflareProvider(Provider):
    """Reads the client address Cloudflare forwards to the origin.

    ``True-Client-IP`` (Enterprise plans) is checked before
    ``CF-Connecting-IP``; each holds a single address.
    """

    name = "cloudflare"
    headers = (TRUE_CLIENT_IP_HEADER, CF_CONNECTING_IP_HEADER)

    def resolve(self, headers: HeaderMapping) -> str:
        values = self.extract_candidates(headers)
        return self._first_allowed(
            values[header] for header in self.headers if header in values
        )
