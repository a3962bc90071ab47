from vecino.presentation.api.routers.auth import router as auth_router
from vecino.presentation.api.routers.bookings import router as bookings_router
from vecino.presentation.api.routers.providers import router as providers_router
from vecino.presentation.api.routers.system import router as system_router

__all__ = [
    "auth_router",
    "bookings_router",
    "providers_router",
    "system_router",
]
