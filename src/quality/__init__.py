"""
Contact Validation Module
"""
from .validators import (
    ContactValidator,
    FieldError,
    ValidationResult,
    create_contact_validator,
    validate_contact,
)

__all__ = [
    "ContactValidator",
    "FieldError",
    "ValidationResult",
    "create_contact_validator",
    "validate_contact",
]
