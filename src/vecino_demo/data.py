"""Demo data definitions for a La Taona resident and local providers.

All data is fictional and used for demonstration purposes only.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from vecino.domain.marketplace import Contact, Provider, ServiceOffering
from vecino.domain.user import User, UserRole
from vecino_auth import PasswordHashingService

DEMO_USER_ID = "64a000000000000000000001"
DEMO_USER_EMAIL = "demo@lataona.com"
DEMO_USER_PASSWORD = "demo123"

DEMO_CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class DemoUserDef:
    """Definition for the demo resident."""

    name: str
    email: str
    password: str
    phone: str
    neighborhood: str
    address: str
    unit_number: str


@dataclass(frozen=True)
class ProviderTemplate:
    """Definition for a provider listing."""

    id: str
    business_name: str
    description: str
    categories: tuple[str, ...]
    neighborhoods_covered: tuple[str, ...]
    services: tuple[ServiceOffering, ...]
    rating: float = 0.0
    contact: Optional[Contact] = None


# =============================================================================
# Demo resident
# =============================================================================

DEMO_USER = DemoUserDef(
    name="Usuario Demo",
    email=DEMO_USER_EMAIL,
    password=DEMO_USER_PASSWORD,
    phone="099123456",
    neighborhood="La Taona",
    address="Calle Principal 123",
    unit_number="Casa 8",
)


# =============================================================================
# Fallback providers (served while the database is unreachable)
# =============================================================================

MOCK_PROVIDERS: list[ProviderTemplate] = [
    ProviderTemplate(
        id="64b000000000000000000001",
        business_name="Jardinería Elegante",
        description="Servicio premium de jardinería para barrios privados",
        categories=("Jardinería",),
        neighborhoods_covered=("La Taona", "Pocitos"),
        services=(
            ServiceOffering(name="Mantenimiento mensual", price=3500, duration="4 horas"),
        ),
        rating=4.8,
    ),
    ProviderTemplate(
        id="64b000000000000000000002",
        business_name="Chef a Domicilio",
        description="Cenas gourmet en tu hogar",
        categories=("Chef a domicilio",),
        neighborhoods_covered=("La Taona",),
        services=(
            ServiceOffering(name="Cena para 4 personas", price=4500, duration="3 horas"),
        ),
        rating=4.9,
    ),
]

# =============================================================================
# Seeded provider (written by ``seed_demo_data``)
# =============================================================================

SEED_PROVIDER = ProviderTemplate(
    id="",
    business_name="Servicio Demo",
    description="Este es un proveedor de demostración",
    categories=("Jardinería",),
    neighborhoods_covered=("La Taona",),
    services=(
        ServiceOffering(
            name="Servicio de demostración",
            price=1000,
            description="Descripción del servicio demo",
            duration="1 hora",
            category="Demo",
        ),
    ),
)


@lru_cache(maxsize=1)
def demo_password_hash() -> str:
    """bcrypt hash of DEMO_USER_PASSWORD, computed once on first use."""
    return PasswordHashingService().hash(DEMO_USER_PASSWORD)


def demo_user(user_id: str = DEMO_USER_ID) -> User:
    return User(
        id=user_id,
        name=DEMO_USER.name,
        email=DEMO_USER.email,
        password_hash=demo_password_hash(),
        phone=DEMO_USER.phone,
        role=UserRole.USER,
        neighborhood=DEMO_USER.neighborhood,
        address=DEMO_USER.address,
        unit_number=DEMO_USER.unit_number,
        is_verified=True,
        created_at=DEMO_CREATED_AT,
    )


def build_provider(
    template: ProviderTemplate,
    owner_id: Optional[str],
) -> Provider:
    """A Provider from a template; a template without id gets a fresh one."""
    provider = Provider.create(
        user_id=owner_id,
        business_name=template.business_name,
        description=template.description,
        categories=list(template.categories),
        neighborhoods_covered=list(template.neighborhoods_covered),
        services=list(template.services),
        contact=template.contact,
    )
    provider.rating = template.rating
    if template.id:
        provider.id = template.id
        provider.created_at = DEMO_CREATED_AT
    return provider


def mock_providers() -> list[Provider]:
    return [build_provider(t, owner_id=DEMO_USER_ID) for t in MOCK_PROVIDERS]
