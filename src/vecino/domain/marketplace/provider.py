"""Provider listing aggregate."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from vecino.domain.marketplace.value_objects import Contact, ServiceOffering
from vecino.domain.shared.identifiers import new_id
from vecino.domain.shared.time import utc_now


@dataclass
class Provider:
    """A business publishing services to residents."""

    id: str
    user_id: Optional[str]
    business_name: str
    description: str
    categories: list[str] = field(default_factory=list)
    neighborhoods_covered: list[str] = field(default_factory=list)
    services: list[ServiceOffering] = field(default_factory=list)
    rating: float = 0.0
    total_reviews: int = 0
    is_verified: bool = False
    is_premium: bool = False
    contact: Contact = field(default_factory=Contact)
    photos: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        user_id: Optional[str],
        business_name: str,
        description: str,
        categories: list[str],
        neighborhoods_covered: list[str],
        services: list[ServiceOffering],
        contact: Optional[Contact] = None,
        photos: Optional[list[str]] = None,
    ) -> "Provider":
        """New, unrated and unverified listing owned by ``user_id``."""
        return cls(
            id=new_id(),
            user_id=user_id,
            business_name=business_name.strip(),
            description=description.strip(),
            categories=list(categories),
            neighborhoods_covered=list(neighborhoods_covered),
            services=list(services),
            contact=contact or Contact(),
            photos=list(photos or []),
        )

    def offers(self, service_name: str) -> bool:
        return any(service.name == service_name for service in self.services)
