"""ASGI middleware that normalizes the client address headers."""

from __future__ import annotations

import logging

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Receive, Scope, Send

from realip.core.resolver import RealIPResolver

logger = logging.getLogger(__name__)

REAL_IP_STATE_KEY = "real_ip"


class RealIPMiddleware:
    """Rewrites ``X-Forwarded-For`` and ``X-Real-Ip`` to the trusted address.

    The resolver is built by the caller so that configuration errors
    surface before the first request.  When no trusted address is found
    the request is forwarded unmodified.

    The resolved address (``""`` when none) is also stored as
    ``scope["state"]["real_ip"]`` so handlers can tell a trusted address
    from a header the client sent itself.
    """

    def __init__(self, app: ASGIApp, resolver: RealIPResolver) -> None:
        self.app = app
        self.resolver = resolver

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] in ("http", "websocket"):
            address = self.resolver.apply(MutableHeaders(scope=scope))
            scope.setdefault("state", {})[REAL_IP_STATE_KEY] = address
            if not address:
                logger.debug("No trusted client address for %s", scope.get("path"))

        await self.app(scope, receive, send)
