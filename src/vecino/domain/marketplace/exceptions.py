"""Marketplace domain exceptions."""

from vecino.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class ProviderNotFoundError(EntityNotFoundError):
    """Provider not found."""

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(
            "Provider not found",
            code=ErrorCode.PROVIDER_NOT_FOUND,
            details={"provider_id": provider_id},
        )
