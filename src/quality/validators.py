"""
Contact Validation Module

Rule-based validation of contact form payloads. Every rule is evaluated
independently, so a payload can fail several rules at once and all of
them are reported. Validation never raises for missing or malformed
fields; those are reported as FieldError entries.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

import structlog

logger = structlog.get_logger(__name__)

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
CONTACT_FIELDS = ("name", "email", "message", "source")


@dataclass(frozen=True)
class FieldError:
    """Single named-field validation failure"""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    """Outcome of validating one payload"""
    errors: List[FieldError] = field(default_factory=list)
    data: Optional[Dict[str, Any]] = None

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def failed_fields(self) -> List[str]:
        return [e.field for e in self.errors]


# A check looks at the payload and returns an error or None
Check = Callable[[Mapping[str, Any]], Optional[FieldError]]


class ContactValidator:
    """
    Payload validator built from independent field checks.

    Example:
        validator = ContactValidator()
        validator.add_min_length_check("name", 2, "Name is too short")
        validator.add_pattern_check("email", EMAIL_PATTERN, "Bad email")
        result = validator.validate(payload)
    """

    def __init__(self):
        self._checks: List[Check] = []

    def add_min_length_check(
        self,
        column: str,
        min_length: int,
        message: str,
        strip: bool = True,
    ) -> "ContactValidator":
        """Require a text value of at least ``min_length`` characters"""
        def check(payload: Mapping[str, Any]) -> Optional[FieldError]:
            value = payload.get(column)
            if not isinstance(value, str):
                return FieldError(column, message)
            text = value.strip() if strip else value
            if len(text) < min_length:
                return FieldError(column, message)
            return None

        self._checks.append(check)
        return self

    def add_max_length_check(
        self,
        column: str,
        max_length: int,
        message: str,
    ) -> "ContactValidator":
        """Cap the raw length of a value; absent values are not checked"""
        def check(payload: Mapping[str, Any]) -> Optional[FieldError]:
            value = payload.get(column)
            if isinstance(value, str) and len(value) > max_length:
                return FieldError(column, message)
            return None

        self._checks.append(check)
        return self

    def add_pattern_check(
        self,
        column: str,
        pattern: str,
        message: str,
    ) -> "ContactValidator":
        """Require a text value matching a regex pattern"""
        compiled = re.compile(pattern)

        def check(payload: Mapping[str, Any]) -> Optional[FieldError]:
            value = payload.get(column)
            if not isinstance(value, str) or not compiled.fullmatch(value):
                return FieldError(column, message)
            return None

        self._checks.append(check)
        return self

    def validate(self, payload: Any) -> ValidationResult:
        """
        Run all checks against a payload.

        Args:
            payload: Submitted form data; non-mappings are treated as empty

        Returns:
            ValidationResult with every failed check, or the accepted data
        """
        if not isinstance(payload, Mapping):
            payload = {}

        errors = [error for error in (check(payload) for check in self._checks) if error]

        if errors:
            logger.info(
                "Contact payload rejected",
                fields=[e.field for e in errors],
            )
            return ValidationResult(errors=errors)

        data = {key: payload.get(key) for key in CONTACT_FIELDS}
        return ValidationResult(data=data)


def create_contact_validator() -> ContactValidator:
    """Create pre-configured validator for contact form submissions"""
    return (
        ContactValidator()
        .add_min_length_check("name", 2, "Name must be at least 2 characters long")
        .add_pattern_check("email", EMAIL_PATTERN, "Please provide a valid email address")
        .add_min_length_check("message", 10, "Message must be at least 10 characters long")
        .add_max_length_check("message", 1000, "Message must not exceed 1000 characters")
    )


def validate_contact(payload: Any) -> ValidationResult:
    """Validate a contact payload with the standard rule set."""
    return create_contact_validator().validate(payload)
