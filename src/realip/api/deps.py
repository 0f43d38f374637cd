"""Centralized FastAPI dependency type aliases."""

from typing import Annotated

from fastapi import Depends, Request

from realip.core.resolver import RealIPResolver
from realip.infra.real_ip import get_real_ip


def get_resolver(request: Request) -> RealIPResolver:
    """Return the ``RealIPResolver`` stored on ``app.state`` by ``create_app``."""
    return request.app.state.resolver


RealIPDep = Annotated[str, Depends(get_real_ip)]
ResolverDep = Annotated[RealIPResolver, Depends(get_resolver)]
