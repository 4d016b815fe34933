"""
Unit tests for API request/response models.

Tests Pydantic model parsing, wire field names and mapping to/from the domain.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.api.models import (
    AccountResponse,
    ErrorResponse,
    PhoneRequest,
    PhoneResponse,
    RegisterRequest,
)
from src.domain.account import AccountView, Phone
from src.domain.contracts import PhoneInput, RegistrationInput


class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_maps_to_registration_input(self) -> None:
        """Wire fields map onto the domain input, contrycode -> country_code."""
        request = RegisterRequest.model_validate(
            {
                "name": "Juan Rodriguez",
                "email": "juan@rodriguez.org",
                "password": "SecurePass123",
                "phones": [{"number": "1234567", "citycode": "1", "contrycode": "57"}],
            }
        )
        assert request.to_input() == RegistrationInput(
            name="Juan Rodriguez",
            email="juan@rodriguez.org",
            password="SecurePass123",
            phones=(PhoneInput(number="1234567", city_code="1", country_code="57"),),
        )

    def test_missing_fields_parse_as_none(self) -> None:
        """Presence is a validation rule, not a parsing rule."""
        payload = RegisterRequest.model_validate({}).to_input()
        assert payload == RegistrationInput()

    def test_empty_phone_list_kept_distinct_from_missing(self) -> None:
        """An empty list stays an empty tuple."""
        assert RegisterRequest(phones=[]).to_input().phones == ()

    def test_countrycode_spelling_not_accepted(self) -> None:
        """Only the wire spelling 'contrycode' populates the country code."""
        phone = PhoneRequest.model_validate({"number": "1", "citycode": "1", "countrycode": "57"})
        assert phone.to_input().country_code is None

    def test_wrong_type_rejected(self) -> None:
        """Non-string scalars are a parsing error."""
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate({"name": 12})

    def test_phones_must_be_list(self) -> None:
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate({"phones": "1234567"})


class TestAccountResponse:
    """Tests for AccountResponse model."""

    def test_from_view_uses_wire_names(self) -> None:
        """Serialized keys match the published response shape."""
        now = datetime(2026, 10, 19, tzinfo=timezone.utc)
        view = AccountView(
            id=uuid4(),
            name="Juan Rodriguez",
            email="juan@rodriguez.org",
            created=now,
            modified=now,
            last_login=now,
            token="h.p.s",
            is_active=True,
            phones=(Phone("1234567", "1", "57"),),
        )
        dumped = AccountResponse.from_view(view).model_dump(mode="json")

        assert set(dumped) == {
            "id",
            "name",
            "email",
            "created",
            "modified",
            "last_login",
            "token",
            "isactive",
            "phones",
        }
        assert dumped["isactive"] is True
        assert dumped["id"] == str(view.id)
        assert dumped["phones"] == [{"number": "1234567", "citycode": "1", "contrycode": "57"}]

    def test_phone_response_from_phone(self) -> None:
        response = PhoneResponse.from_phone(Phone("1234567", "1", "57"))
        assert response.contrycode == "57"


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_valid_error_response(self) -> None:
        """Error body uses the 'mensaje' key."""
        assert ErrorResponse(mensaje="El correo ya registrado").model_dump() == {
            "mensaje": "El correo ya registrado"
        }
