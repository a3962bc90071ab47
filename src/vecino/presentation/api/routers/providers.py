"""Provider listing router."""

from fastapi import APIRouter, Depends, status

from vecino.domain.user import UserRole
from vecino.presentation.api.dependencies import (
    CurrentClaims,
    DataStoreDep,
    ProviderServiceDep,
    RequireRole,
    authenticate_request,
)
from vecino.presentation.api.schemas.common import ErrorResponse
from vecino.presentation.api.schemas.providers import (
    CreateProviderRequest,
    ProviderDetailResponse,
    ProviderListResponse,
    ProviderResponse,
)

router = APIRouter()


@router.get("", summary="List providers")
async def list_providers(
    store: DataStoreDep,
    provider_service: ProviderServiceDep,
) -> ProviderListResponse:
    """List every provider; ``source`` says whether the data is live or mock."""
    providers = await provider_service.list_providers()
    return ProviderListResponse(
        source=store.source,
        count=len(providers),
        data=[ProviderResponse.from_domain(p) for p in providers],
    )


@router.get(
    "/{provider_id}",
    summary="Get a provider",
    responses={404: {"model": ErrorResponse, "description": "Provider not found"}},
)
async def get_provider(
    provider_id: str,
    provider_service: ProviderServiceDep,
) -> ProviderDetailResponse:
    provider = await provider_service.get_provider(provider_id)
    return ProviderDetailResponse(data=ProviderResponse.from_domain(provider))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Publish a provider listing",
    dependencies=[
        Depends(authenticate_request),
        Depends(RequireRole(UserRole.PROVIDER, UserRole.ADMIN)),
    ],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid payload"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        403: {"model": ErrorResponse, "description": "Role not allowed"},
        503: {"model": ErrorResponse, "description": "Database not available"},
    },
)
async def create_provider(
    request: CreateProviderRequest,
    claims: CurrentClaims,
    provider_service: ProviderServiceDep,
) -> ProviderDetailResponse:
    """Create a listing owned by the caller. Providers and admins only."""
    provider = await provider_service.create_provider(
        owner_id=claims.user_id,
        business_name=request.business_name,
        description=request.description,
        categories=request.categories,
        neighborhoods_covered=request.neighborhoods_covered,
        services=[s.model_dump() for s in request.services],
        contact=request.contact.model_dump() if request.contact else None,
        photos=request.photos,
    )
    return ProviderDetailResponse(
        message="Provider created successfully",
        data=ProviderResponse.from_domain(provider),
    )
