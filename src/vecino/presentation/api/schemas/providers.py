"""Provider listing schemas."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from vecino.domain.marketplace import Provider
from vecino.presentation.api.schemas.common import CamelModel


class ServiceOfferingSchema(CamelModel):
    name: Optional[str] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    description: Optional[str] = None
    duration: Optional[str] = None
    category: Optional[str] = None


class ContactSchema(CamelModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    response_time: Optional[str] = None


class CreateProviderRequest(CamelModel):
    """Request schema for publishing a provider listing."""

    business_name: Optional[str] = None
    description: Optional[str] = None
    categories: list[str] = Field(default_factory=list)
    neighborhoods_covered: list[str] = Field(default_factory=list)
    services: list[ServiceOfferingSchema] = Field(default_factory=list)
    contact: Optional[ContactSchema] = None
    photos: list[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "businessName": "Jardinería Elegante",
                "description": "Servicio premium de jardinería",
                "categories": ["Jardinería"],
                "neighborhoodsCovered": ["La Taona", "Pocitos"],
                "services": [{"name": "Mantenimiento mensual", "price": 3500}],
            },
        },
    )


class ProviderResponse(CamelModel):
    id: str
    user_id: Optional[str]
    business_name: str
    description: str
    categories: list[str]
    neighborhoods_covered: list[str]
    services: list[ServiceOfferingSchema]
    rating: float
    total_reviews: int
    is_verified: bool
    is_premium: bool
    contact: ContactSchema
    photos: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, provider: Provider) -> "ProviderResponse":
        return cls(
            id=provider.id,
            user_id=provider.user_id,
            business_name=provider.business_name,
            description=provider.description,
            categories=provider.categories,
            neighborhoods_covered=provider.neighborhoods_covered,
            services=[ServiceOfferingSchema(**s.to_dict()) for s in provider.services],
            rating=provider.rating,
            total_reviews=provider.total_reviews,
            is_verified=provider.is_verified,
            is_premium=provider.is_premium,
            contact=ContactSchema(**provider.contact.to_dict()),
            photos=provider.photos,
            created_at=provider.created_at,
        )


class ProviderListResponse(CamelModel):
    success: bool = True
    source: str = Field(..., description="'database' or 'mock'")
    count: int
    data: list[ProviderResponse]


class ProviderDetailResponse(CamelModel):
    success: bool = True
    message: Optional[str] = None
    data: ProviderResponse
