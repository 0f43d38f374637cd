"""Provider interface: a named strategy for reading the client IP from headers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Mapping

from ..exclusion import ExclusionFilter

# Header lookups go through ``Mapping.get``; callers pass a case-insensitive
# mapping such as ``starlette.datastructures.Headers``.
HeaderMapping = Mapping[str, str]


class Provider(ABC):
    """Base class for header-source providers.

    Subclasses declare ``name`` and ``headers``.  The exclusion filter is
    shared and read-only; no per-request state is kept on the instance.
    """

    name: str = ""
    headers: tuple[str, ...] = ()

    def __init__(self, exclusion: ExclusionFilter) -> None:
        self._exclusion = exclusion

    @property
    def exclusion(self) -> ExclusionFilter:
        return self._exclusion

    def extract_candidates(self, headers: HeaderMapping) -> dict[str, str]:
        """Return ``{header: trimmed value}`` for the headers present.

        A fresh dict is built on every call.  Empty or whitespace-only
        values are treated as absent.
        """
        values: dict[str, str] = {}
        for header in self.headers:
            value = (headers.get(header) or "").strip()
            if value:
                values[header] = value
        return values

    @abstractmethod
    def resolve(self, headers: HeaderMapping) -> str:
        """Return the first trusted address, or ``""`` when there is none."""

    def _first_allowed(self, candidates: Iterable[str]) -> str:
        for candidate in candidates:
            if not self._exclusion.is_excluded(candidate):
                return candidate
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(headers={list(self.headers)})"
