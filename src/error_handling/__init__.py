"""Error taxonomy and classification for the address book."""

from .contact_errors import (
    AddressBookError,
    ContactValidationError,
    InvalidNameError,
    InvalidAddressGroupError,
    InvalidZipError,
    InvalidPhoneError,
    InvalidEmailError,
    DuplicateContactError,
    ContactNotFoundError,
)
from .error_classifier import ErrorClassifier, ErrorClassification, ErrorCategory, ErrorSeverity

__all__ = [
    "AddressBookError",
    "ContactValidationError",
    "InvalidNameError",
    "InvalidAddressGroupError",
    "InvalidZipError",
    "InvalidPhoneError",
    "InvalidEmailError",
    "DuplicateContactError",
    "ContactNotFoundError",
    "ErrorClassifier",
    "ErrorClassification",
    "ErrorCategory",
    "ErrorSeverity",
]
