"""Data models for the address book."""

from .contact_models import (
    Contact,
    ContactResult,
    validate_name,
    validate_address,
    validate_zip,
    validate_phone,
    validate_email,
    validate_contact_fields,
)
from .book_models import OperationResult, LocationGrouping, LocationCounts

__all__ = [
    "Contact",
    "ContactResult",
    "validate_name",
    "validate_address",
    "validate_zip",
    "validate_phone",
    "validate_email",
    "validate_contact_fields",
    "OperationResult",
    "LocationGrouping",
    "LocationCounts"
]
