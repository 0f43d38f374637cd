"""Real client IP lookup for route handlers.

Only the address ``RealIPMiddleware`` resolved is trusted; proxy headers
are never read here, since a client can send them unmodified when no
trusted address was found.  Lookup order:

1. ``request.state.real_ip``: set by the middleware when a provider matched
2. ``request.client.host``: no trusted address (local dev / direct access)
3. ``"unknown"``
"""

from __future__ import annotations

from fastapi import Request

from .middleware import REAL_IP_STATE_KEY

_DEFAULT_UNKNOWN_IP = "unknown"


def get_real_ip(request: Request) -> str:
    """Return the client IP for ``request``.

    Usable as a FastAPI dependency::

        real_ip: str = Depends(get_real_ip)
    """
    address = getattr(request.state, REAL_IP_STATE_KEY, "")
    if address:
        return address

    if request.client:
        return request.client.host

    return _DEFAULT_UNKNOWN_IP
