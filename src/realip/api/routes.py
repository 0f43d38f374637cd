"""HTTP endpoints exposing the resolved client address."""

from fastapi import APIRouter, Request

from .deps import RealIPDep, ResolverDep
from .models import ClientIPResponse, HealthResponse

router = APIRouter()


@router.get("/health")
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/ip")
async def client_ip(
    request: Request,
    real_ip: RealIPDep,
    resolver: ResolverDep,
) -> ClientIPResponse:
    """Echo the client address and the normalized proxy headers."""
    return ClientIPResponse(
        ip=real_ip,
        x_real_ip=request.headers.get("x-real-ip"),
        x_forwarded_for=request.headers.get("x-forwarded-for"),
        providers=list(resolver.enabled_providers),
        preferred_provider=resolver.preferred_provider or None,
    )
