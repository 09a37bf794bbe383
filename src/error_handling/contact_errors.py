"""Exception taxonomy for the address book."""

from typing import Optional


class AddressBookError(Exception):
    """Base class for all address book errors."""


class ContactValidationError(AddressBookError, ValueError):
    """Raised when a contact field group fails validation at construction time."""

    field_group = "unknown"
    default_message = "Invalid contact details."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidNameError(ContactValidationError):
    field_group = "name"
    default_message = (
        "First name and last name must start with a capital letter "
        "and be at least 3 characters long."
    )


class InvalidAddressGroupError(ContactValidationError):
    field_group = "address"
    default_message = "Address, city, and state must be at least 4 characters long."


class InvalidZipError(ContactValidationError):
    field_group = "zip"
    default_message = "Invalid ZIP code. It should be a 6-digit number."


class InvalidPhoneError(ContactValidationError):
    field_group = "phone"
    default_message = "Invalid phone number. It should be a 10-digit number."


class InvalidEmailError(ContactValidationError):
    field_group = "email"
    default_message = "Invalid email format."


class DuplicateContactError(AddressBookError):
    """Describes an add rejected because the first/last name pair already exists.

    Attached to operation results; never raised by public AddressBook operations.
    """

    def __init__(self, first_name: str, last_name: str):
        self.first_name = first_name
        self.last_name = last_name
        super().__init__(f"Duplicate contact entry detected: {first_name} {last_name}")


class ContactNotFoundError(AddressBookError):
    """Describes an edit or delete whose name key matched no contact."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Contact not found: {name}")
