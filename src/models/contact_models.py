"""Contact data model and field validators."""

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from ..error_handling.contact_errors import (
    ContactValidationError,
    InvalidNameError,
    InvalidAddressGroupError,
    InvalidZipError,
    InvalidPhoneError,
    InvalidEmailError,
)

NAME_PATTERN = re.compile(r"[A-Z][a-zA-Z]{2,}")
ADDRESS_PATTERN = re.compile(r".{4,}", re.DOTALL)
ZIP_PATTERN = re.compile(r"[0-9]{6}")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Original (camelCase) field names accepted wherever field names are
FIELD_ALIASES = {
    "firstName": "first_name",
    "lastName": "last_name",
    "zip": "zip_code",
}


def _matches(pattern: "re.Pattern[str]", value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_name(name: Any) -> bool:
    """Capital ASCII letter followed by at least two ASCII letters."""
    return _matches(NAME_PATTERN, name)


def validate_address(value: Any) -> bool:
    """Any four or more characters; used for address, city and state."""
    return _matches(ADDRESS_PATTERN, value)


def validate_zip(zip_code: Any) -> bool:
    return _matches(ZIP_PATTERN, zip_code)


def validate_phone(phone: Any) -> bool:
    return _matches(PHONE_PATTERN, phone)


def validate_email(email: Any) -> bool:
    return _matches(EMAIL_PATTERN, email)


def validate_contact_fields(first_name: Any, last_name: Any, address: Any, city: Any, state: Any,
                            zip_code: Any, phone: Any, email: Any) -> Optional[ContactValidationError]:
    """Check the field groups in order and return the first failure, or None.

    Groups are checked name, address/city/state, zip, phone, email; later
    groups are not looked at once one fails.
    """
    if not validate_name(first_name) or not validate_name(last_name):
        return InvalidNameError()
    if not validate_address(address) or not validate_address(city) or not validate_address(state):
        return InvalidAddressGroupError()
    if not validate_zip(zip_code):
        return InvalidZipError()
    if not validate_phone(phone):
        return InvalidPhoneError()
    if not validate_email(email):
        return InvalidEmailError()
    return None


def normalize_field_name(name: str) -> str:
    """Resolve a camelCase alias to its Contact field name."""
    return FIELD_ALIASES.get(name, name)


@dataclass
class Contact:
    """A single validated person record.

    Every field is validated when the contact is constructed. Later
    attribute assignments are not re-validated.
    """
    first_name: str
    last_name: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: str
    email: str

    def __post_init__(self):
        """Validate all field groups."""
        error = validate_contact_fields(
            self.first_name, self.last_name, self.address, self.city,
            self.state, self.zip_code, self.phone, self.email
        )
        if error is not None:
            raise error

    @classmethod
    def create(cls, **contact_fields: Any) -> "ContactResult":
        """Build a contact without raising on invalid input."""
        try:
            return ContactResult(contact=cls(**contact_fields))
        except ContactValidationError as e:
            return ContactResult(error=e)

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def display_contact(self) -> str:
        """Render the contact as a single human-readable line."""
        return (
            f"{self.first_name} {self.last_name}, {self.address}, {self.city}, "
            f"{self.state}, {self.zip_code}, Phone: {self.phone}, Email: {self.email}"
        )

    def __str__(self) -> str:
        return self.display_contact()

    def to_dict(self) -> Dict[str, Any]:
        """Convert contact to dictionary using the original field names."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zip": self.zip_code,
            "phone": self.phone,
            "email": self.email
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Contact":
        """Create a contact from a dictionary keyed by field names or aliases."""
        return cls(**{normalize_field_name(key): value for key, value in data.items()})


@dataclass
class ContactResult:
    """Outcome of building a contact: either a contact or the validation error."""
    contact: Optional[Contact] = None
    error: Optional[ContactValidationError] = None

    def __post_init__(self):
        """Validate that exactly one of contact and error is set."""
        if (self.contact is None) == (self.error is None):
            raise ValueError("ContactResult needs exactly one of contact or error")

    @property
    def ok(self) -> bool:
        return self.contact is not None
