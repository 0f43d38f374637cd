"""Qrator provider."""

from __future__ import annotations

from .base import HeaderMapping, Provider

X_QRATOR_IP_SOURCE_HEADER = "X-Qrator-IP-Source"


class QratorProvider(Provider):
    """Reads the single ``X-Qrator-IP-Source`` header set by Qrator."""

    name = "qrator"
    headers = (X_QRATOR_IP_SOURCE_HEADER,)

    def resolve(self, headers: HeaderMapping) -> str:
        values = self.extract_candidates(headers)
        return self._first_allowed(values.values())
