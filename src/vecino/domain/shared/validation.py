"""Explicit input validation results.

Validators return a ValidationResult instead of raising, so callers can
report every problem at once and decide how to surface them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vecino.domain.shared.exceptions import ValidationError


@dataclass(frozen=True)
class FieldError:
    """A single problem with one input field."""

    field: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating a payload: ok, or a list of field errors."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field_name, message))

    def fields(self) -> list[str]:
        return [error.field for error in self.errors]

    def raise_if_invalid(self, summary: str | None = None) -> None:
        """Raise ValidationError carrying every field error.

        ``summary`` replaces the joined field messages as the public
        error message when given.
        """
        if self.is_valid:
            return
        message = summary or "; ".join(error.message for error in self.errors)
        raise ValidationError(
            message,
            details={
                "fields": [
                    {"field": error.field, "message": error.message}
                    for error in self.errors
                ],
            },
        )


def clean_text(value: Any) -> str | None:
    """Strip strings; map blanks and non-strings to None."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None
