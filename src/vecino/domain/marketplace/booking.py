"""Booking aggregate."""

from dataclasses import dataclass, field
from datetime import date, datetime

from vecino.domain.marketplace.value_objects import BookingStatus
from vecino.domain.shared.identifiers import new_id
from vecino.domain.shared.time import utc_now


@dataclass
class Booking:
    """A resident's request for one service of one provider."""

    id: str
    user_id: str
    provider_id: str
    service_name: str
    date: date
    time: str
    address: str
    price: float
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        user_id: str,
        provider_id: str,
        service_name: str,
        date: date,
        time: str,
        address: str,
        price: float,
    ) -> "Booking":
        return cls(
            id=new_id(),
            user_id=user_id,
            provider_id=provider_id,
            service_name=service_name.strip(),
            date=date,
            time=time,
            address=address.strip(),
            price=float(price),
        )
