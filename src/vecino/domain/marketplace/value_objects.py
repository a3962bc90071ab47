"""Catalog enums and small value types of the marketplace."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ServiceCategory(str, Enum):
    """Services a provider can offer."""

    GARDENING = "Jardinería"
    HOUSE_CLEANING = "Limpieza del hogar"
    CAR_WASH = "Lavado de autos"
    PRIVATE_CHEF = "Chef a domicilio"
    CARPENTRY = "Carpintería"
    PLUMBING = "Plomería"
    ELECTRICAL = "Electricidad"
    BABYSITTING = "Niñera"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class CoverageArea(str, Enum):
    """Areas a provider can serve."""

    LA_TAONA = "La Taona"
    POCITOS = "Pocitos"
    MALVIN = "Malvín"
    ALL_MONTEVIDEO = "Todo Montevideo"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class BookingStatus(str, Enum):
    PENDING = "pendiente"
    CONFIRMED = "confirmado"
    CANCELLED = "cancelado"
    COMPLETED = "completado"


@dataclass(frozen=True)
class ServiceOffering:
    """One priced service inside a provider listing."""

    name: str
    price: float
    description: Optional[str] = None
    duration: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServiceOffering":
        return cls(
            name=str(data["name"]).strip(),
            price=float(data["price"]),
            description=data.get("description"),
            duration=data.get("duration"),
            category=data.get("category"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "price": self.price,
            "description": self.description,
            "duration": self.duration,
            "category": self.category,
        }


@dataclass(frozen=True)
class Contact:
    phone: Optional[str] = None
    email: Optional[str] = None
    response_time: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "Contact":
        data = data or {}
        return cls(
            phone=data.get("phone"),
            email=data.get("email"),
            response_time=data.get("response_time"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "phone": self.phone,
            "email": self.email,
            "response_time": self.response_time,
        }
