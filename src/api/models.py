"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field names are the wire names, including the historical "contrycode"
spelling for the phone country code.

Request fields are optional at the schema level: presence and pattern rules
are applied by RegistrationValidator so every rejection carries the same
message format.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.account import AccountView, Phone
from src.domain.contracts import PhoneInput, RegistrationInput


class PhoneRequest(BaseModel):
    """Phone entry in a registration request."""

    number: str | None = None
    citycode: str | None = None
    contrycode: str | None = Field(None, description="Country code")

    def to_input(self) -> PhoneInput:
        return PhoneInput(number=self.number, city_code=self.citycode, country_code=self.contrycode)


class RegisterRequest(BaseModel):
    """Request model for account registration."""

    name: str | None = None
    email: str | None = None
    password: str | None = Field(None, description="Password (policy set by configuration)")
    phones: list[PhoneRequest] | None = None

    def to_input(self) -> RegistrationInput:
        return RegistrationInput(
            name=self.name,
            email=self.email,
            password=self.password,
            phones=None if self.phones is None else tuple(p.to_input() for p in self.phones),
        )


class PhoneResponse(BaseModel):
    """Phone entry in an account response."""

    number: str
    citycode: str
    contrycode: str

    @classmethod
    def from_phone(cls, phone: Phone) -> "PhoneResponse":
        return cls(number=phone.number, citycode=phone.city_code, contrycode=phone.country_code)


class AccountResponse(BaseModel):
    """Response model for a successful registration."""

    id: UUID
    name: str
    email: str
    created: datetime
    modified: datetime
    last_login: datetime
    token: str
    isactive: bool
    phones: list[PhoneResponse]

    @classmethod
    def from_view(cls, view: AccountView) -> "AccountResponse":
        return cls(
            id=view.id,
            name=view.name,
            email=view.email,
            created=view.created,
            modified=view.modified,
            last_login=view.last_login,
            token=view.token,
            isactive=view.is_active,
            phones=[PhoneResponse.from_phone(phone) for phone in view.phones],
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    mensaje: str
