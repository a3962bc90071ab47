"""Provider and booking payload checks."""

import math
import re
from datetime import date, datetime
from typing import Any, Optional

from vecino.domain.marketplace.value_objects import CoverageArea, ServiceCategory
from vecino.domain.shared.validation import ValidationResult, clean_text

MAX_DESCRIPTION_LENGTH = 500
TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def parse_booking_date(value: Any) -> Optional[date]:
    """Accept a date or a whole ISO date or datetime string; None otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def validate_provider(  # NOQA: PLR0913, C901
    business_name: Any,
    description: Any,
    categories: Any,
    neighborhoods_covered: Any,
    services: Any,
) -> ValidationResult:
    result = ValidationResult()

    if clean_text(business_name) is None:
        result.add("business_name", "Business name is required")

    clean_description = clean_text(description)
    if clean_description is None:
        result.add("description", "Description is required")
    elif len(clean_description) > MAX_DESCRIPTION_LENGTH:
        result.add(
            "description",
            f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters",
        )

    unknown = [c for c in categories or [] if c not in ServiceCategory.values()]
    if unknown:
        result.add("categories", "Unknown categories: " + ", ".join(map(str, unknown)))

    if not neighborhoods_covered:
        result.add("neighborhoods_covered", "At least one neighborhood is required")
    else:
        unknown = [n for n in neighborhoods_covered if n not in CoverageArea.values()]
        if unknown:
            result.add(
                "neighborhoods_covered",
                "Unknown neighborhoods: " + ", ".join(map(str, unknown)),
            )

    for index, service in enumerate(services or []):
        if not isinstance(service, dict) or clean_text(service.get("name")) is None:
            result.add(f"services[{index}].name", "Service name is required")
            continue
        price = service.get("price")
        if not _is_number(price) or price < 0:
            result.add(f"services[{index}].price", "Service price must be >= 0")

    return result


def validate_booking(  # NOQA: PLR0913
    provider_id: Any,
    service_name: Any,
    booking_date: Any,
    time: Any,
    address: Any,
    price: Any,
) -> ValidationResult:
    result = ValidationResult()

    if clean_text(provider_id) is None:
        result.add("provider_id", "Provider is required")
    if clean_text(service_name) is None:
        result.add("service_name", "Service name is required")
    if parse_booking_date(booking_date) is None:
        result.add("date", "Date must be an ISO date (YYYY-MM-DD)")
    if not isinstance(time, str) or not TIME_PATTERN.match(time.strip()):
        result.add("time", "Time must be HH:MM")
    if clean_text(address) is None:
        result.add("address", "Address is required")
    if not _is_number(price) or price <= 0:
        result.add("price", "Price must be greater than 0")

    return result
