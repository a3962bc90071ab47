"""Authentication router for registration, login and profile."""

from fastapi import APIRouter, status

from vecino.presentation.api.dependencies import AuthService, CurrentClaims
from vecino.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UserResponse,
)
from vecino.presentation.api.schemas.common import ErrorResponse

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input or duplicate email"},
        503: {"model": ErrorResponse, "description": "Database not available"},
    },
)
async def register(request: RegisterRequest, auth_service: AuthService) -> AuthResponse:
    """
    Create an account and return a session token.

    Only ``name``, ``email`` and ``password`` are required; residency
    fields fall back to the neighborhood defaults. ``role`` may be
    ``user`` or ``provider``.
    """
    user, token = await auth_service.register(
        name=request.name,
        email=request.email,
        password=request.password,
        phone=request.phone,
        neighborhood=request.neighborhood,
        address=request.address,
        unit_number=request.unit_number,
        role=request.role,
    )
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserResponse.from_domain(user),
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Missing fields"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> AuthResponse:
    """
    Authenticate with email and password.

    The email is matched case-insensitively. Unknown email and wrong
    password produce the same response.
    """
    user, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.from_domain(user),
    )


@router.get(
    "/profile",
    summary="Get current user profile",
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def profile(claims: CurrentClaims, auth_service: AuthService) -> ProfileResponse:
    user = await auth_service.get_profile(claims.user_id)
    return ProfileResponse(user=UserResponse.from_domain(user))
