"""User aggregate for identity concerns."""

from datetime import datetime
from typing import Union

from vecino.domain.shared.identifiers import new_id
from vecino.domain.shared.time import utc_now
from vecino.domain.user.value_objects import (
    DEFAULT_NEIGHBORHOOD,
    Email,
    Neighborhood,
    UserRole,
)
from vecino_auth.services.password_service import PasswordHashingService

DEFAULT_PHONE = "099123456"
DEFAULT_ADDRESS = "Dirección no especificada"
DEFAULT_UNIT_NUMBER = "N/A"


class User:
    """
    User aggregate root.

    A resident, service provider or administrator account. The password
    is only ever held as a bcrypt hash: constructing a User with anything
    else is rejected.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        phone: str = DEFAULT_PHONE,
        role: Union[str, UserRole] = UserRole.USER,
        neighborhood: Union[str, Neighborhood] = DEFAULT_NEIGHBORHOOD,
        address: str = DEFAULT_ADDRESS,
        unit_number: str = DEFAULT_UNIT_NUMBER,
        is_verified: bool = False,
        profile_image: str = "",
        favorites: list[str] | None = None,
        id: str | None = None,
        created_at: datetime | None = None,
    ):
        if not PasswordHashingService.is_hash(password_hash):
            msg = "User.password_hash must be a bcrypt hash, never a plaintext password"
            raise ValueError(msg)

        self._id = id or new_id()
        self._name = name.strip()
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._phone = phone
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._neighborhood = (
            neighborhood
            if isinstance(neighborhood, Neighborhood)
            else Neighborhood(neighborhood)
        )
        self._address = address
        self._unit_number = unit_number
        self._is_verified = is_verified
        self._profile_image = profile_image
        self._favorites = list(favorites or [])
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def is_provider(self) -> bool:
        return self._role == UserRole.PROVIDER

    @property
    def neighborhood(self) -> Neighborhood:
        return self._neighborhood

    @property
    def address(self) -> str:
        return self._address

    @property
    def unit_number(self) -> str:
        return self._unit_number

    @property
    def is_verified(self) -> bool:
        return self._is_verified

    @property
    def profile_image(self) -> str:
        return self._profile_image

    @property
    def favorites(self) -> list[str]:
        return list(self._favorites)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def token_claims(self) -> dict[str, str]:
        """Claims embedded in a session token besides id and role."""
        return {"email": self.email, "neighborhood": self._neighborhood.value}

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        phone: str | None = None,
        role: UserRole = UserRole.USER,
        neighborhood: Union[str, Neighborhood, None] = None,
        address: str | None = None,
        unit_number: str | None = None,
        is_verified: bool = False,
    ) -> "User":
        """Build a new account, filling the residency defaults."""
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            phone=phone or DEFAULT_PHONE,
            role=role,
            neighborhood=neighborhood or DEFAULT_NEIGHBORHOOD,
            address=address or DEFAULT_ADDRESS,
            unit_number=unit_number or DEFAULT_UNIT_NUMBER,
            is_verified=is_verified,
        )

    @classmethod
    def reconstitute(cls, **fields) -> "User":
        """Rebuild a stored user; every attribute comes from storage."""
        return cls(**fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
