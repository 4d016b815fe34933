"""
Registration input validation.

Email and password rules are driven by externally configured regular
expressions so password/email strictness can be tuned without a code
change. Patterns use full-match semantics: the whole value must match.

Checks run in a fixed order and the first failing check wins:

    name required -> email required -> email format ->
    password required -> password format -> password length ->
    phones non-empty -> per phone: number, city code, country code
"""

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .account import PHONES_REQUIRED_MESSAGE
from .contracts import PhoneInput, RegistrationInput
from .exceptions import ConfigurationFault, ValidationFailure

PatternLike = str | re.Pattern[str]


def _compile(pattern: PatternLike) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationFault(f"Invalid validation pattern {pattern!r}: {e}") from e


def is_valid_email(value: str | None, pattern: PatternLike) -> bool:
    """Return True if value is structurally an email under the given pattern."""
    if value is None:
        return False
    return _compile(pattern).fullmatch(value) is not None


def is_valid_password(value: str | None, pattern: PatternLike) -> bool:
    """Return True if value satisfies the password policy pattern."""
    if value is None:
        return False
    return _compile(pattern).fullmatch(value) is not None


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class FieldRule:
    """A named check over the whole payload."""

    field: str
    message: str
    passes: Callable[[RegistrationInput], bool]


@dataclass(frozen=True)
class PhoneRule:
    """A named check over a single phone entry."""

    field: str
    message: str
    passes: Callable[[PhoneInput], bool]


PHONE_RULES = (
    PhoneRule("number", "El número de teléfono es requerido", lambda p: not is_blank(p.number)),
    PhoneRule("citycode", "El código de ciudad es requerido", lambda p: not is_blank(p.city_code)),
    PhoneRule(
        "contrycode", "El código de país es requerido", lambda p: not is_blank(p.country_code)
    ),
)


class RegistrationValidator:
    """
    Ordered rule set applied to a parsed registration payload.

    Construction compiles the configured patterns; a pattern that does not
    compile raises ConfigurationFault.
    """

    def __init__(
        self,
        email_pattern: PatternLike,
        password_pattern: PatternLike,
        password_max_length: int = 70,
    ) -> None:
        self._email_pattern = _compile(email_pattern)
        self._password_pattern = _compile(password_pattern)
        self._password_max_length = password_max_length
        self._rules = (
            FieldRule("name", "El nombre es requerido", lambda p: not is_blank(p.name)),
            FieldRule("email", "El correo es requerido", lambda p: not is_blank(p.email)),
            FieldRule(
                "email",
                "Formato de correo inválido",
                lambda p: is_valid_email(p.email, self._email_pattern),
            ),
            FieldRule(
                "password", "La contraseña es requerida", lambda p: not is_blank(p.password)
            ),
            FieldRule(
                "password",
                "Formato de contraseña inválido",
                lambda p: is_valid_password(p.password, self._password_pattern),
            ),
            FieldRule(
                "password",
                f"La contraseña no debe exceder los {password_max_length} caracteres",
                lambda p: len(p.password or "") <= self._password_max_length,
            ),
            FieldRule("phones", PHONES_REQUIRED_MESSAGE, lambda p: bool(p.phones)),
        )

    def failures(self, payload: RegistrationInput) -> Iterator[ValidationFailure]:
        """Yield every failed check, in evaluation order."""
        for rule in self._rules:
            if not rule.passes(payload):
                yield ValidationFailure(rule.message, rule.field)
        for index, phone in enumerate(payload.phones or ()):
            for rule in PHONE_RULES:
                if not rule.passes(phone):
                    yield ValidationFailure(rule.message, f"phones[{index}].{rule.field}")

    def validate(self, payload: RegistrationInput) -> None:
        """
        Reject the payload on the first failed check.

        Raises:
            ValidationFailure: carrying the first offending field's message
        """
        failure = next(self.failures(payload), None)
        if failure is not None:
            raise failure
