"""
API routes - Account registration endpoint.

This module defines the HTTP endpoints:
- POST /api/users - Register a new account
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_registration_service, get_registration_validator
from src.api.models import AccountResponse, ErrorResponse, RegisterRequest
from src.domain.registration import RegistrationService
from src.domain.validation import RegistrationValidator

router = APIRouter(tags=["users"])


@router.post(
    "/users",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid data or email already registered"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
    summary="Register a new user",
    description="Creates an account after validating email and password "
    "against the configured patterns. Returns the account with its access token.",
)
def register_user(
    request_data: RegisterRequest,
    validator: RegistrationValidator = Depends(get_registration_validator),
    service: RegistrationService = Depends(get_registration_service),
) -> AccountResponse:
    """
    Register a new user account.

    - **name**: Display name
    - **email**: Email address, unique across accounts
    - **password**: Password matching the configured policy (max 70 characters)
    - **phones**: At least one phone (number, citycode, contrycode)

    Declared as a plain function so FastAPI runs it in the threadpool:
    bcrypt hashing and database calls are blocking.
    """
    payload = request_data.to_input()
    validator.validate(payload)
    view = service.register_account(payload)
    return AccountResponse.from_view(view)
