"""Generic provider: ``X-Real-Ip`` and the ``X-Forwarded-For`` chain."""

from __future__ import annotations

from .base import HeaderMapping, Provider

X_REAL_IP_HEADER = "X-Real-Ip"
X_FORWARDED_FOR_HEADER = "X-Forwarded-For"


class GenericProvider(Provider):
    """Reads headers set by ordinary reverse proxies.

    ``X-Real-Ip`` is a single address and is consulted first.  If it is
    missing or excluded, ``X-Forwarded-For`` is split on commas and the
    leftmost trusted hop wins.
    """

    name = "generic"
    headers = (X_REAL_IP_HEADER, X_FORWARDED_FOR_HEADER)

    def resolve(self, headers: HeaderMapping) -> str:
        values = self.extract_candidates(headers)

        real_ip = values.get(X_REAL_IP_HEADER)
        if real_ip and not self.exclusion.is_excluded(real_ip):
            return real_ip

        forwarded_for = values.get(X_FORWARDED_FOR_HEADER)
        if forwarded_for:
            chain = [hop.strip() for hop in forwarded_for.split(",")]
            return self._first_allowed(chain)

        return ""
