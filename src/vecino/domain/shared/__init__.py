from vecino.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ServiceUnavailableError,
    ValidationError,
)
from vecino.domain.shared.identifiers import new_id
from vecino.domain.shared.time import date_to_utc_datetime, ensure_tz_aware, utc_now
from vecino.domain.shared.validation import FieldError, ValidationResult, clean_text

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "FieldError",
    "ServiceUnavailableError",
    "ValidationError",
    "ValidationResult",
    "clean_text",
    "date_to_utc_datetime",
    "ensure_tz_aware",
    "new_id",
    "utc_now",
]
