"""
Address book collection manager.

Owns an ordered list of validated contacts and exposes add, edit, delete,
query, grouping and sort operations over it. No public operation raises for
validation, duplicate or not-found outcomes; each one reports an
OperationResult and logs it instead.
"""

import dataclasses
import logging
from typing import Any, Dict, Iterator, List, Optional

from ..config.config_manager import AddressBookConfig
from ..error_handling.contact_errors import (
    ContactValidationError, DuplicateContactError, ContactNotFoundError
)
from ..error_handling.error_classifier import ErrorClassifier
from ..models.contact_models import Contact, normalize_field_name
from ..models.book_models import OperationResult, LocationGrouping, LocationCounts
from ..notifications.message_formatter import OperationMessageFormatter
from .collation import collation_key

logger = logging.getLogger(__name__)


class AddressBook:
    """Ordered, in-memory collection of contacts."""

    def __init__(self,
                 config: Optional[AddressBookConfig] = None,
                 formatter: Optional[OperationMessageFormatter] = None,
                 error_classifier: Optional[ErrorClassifier] = None):
        """Initialize an empty address book.

        Args:
            config: Reporting configuration
            formatter: Message formatter for operation reports
            error_classifier: Classifier used to pick log levels for failures
        """
        self.config = config or AddressBookConfig()
        self.formatter = formatter or OperationMessageFormatter(
            include_contact_details=self.config.log_contact_details
        )
        self.error_classifier = error_classifier or ErrorClassifier()
        self._contacts: List[Contact] = []

    @property
    def contacts(self) -> List[Contact]:
        """Shallow copy of the contact sequence in its current order."""
        return list(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))

    def add_contact(self, first_name: str, last_name: str, address: str, city: str,
                    state: str, zip_code: str, phone: str, email: str) -> OperationResult:
        """
        Validate and append a new contact.

        A contact with the same first and last name is rejected before any
        validation happens.

        Returns:
            OperationResult with status success, duplicate or invalid
        """
        key = f"{first_name} {last_name}"

        if any(c.first_name == first_name and c.last_name == last_name for c in self._contacts):
            return self._failure(
                "add", "duplicate", key,
                self.formatter.format_duplicate(first_name, last_name),
                DuplicateContactError(first_name, last_name)
            )

        result = Contact.create(
            first_name=first_name, last_name=last_name, address=address, city=city,
            state=state, zip_code=zip_code, phone=phone, email=email
        )
        if not result.ok:
            return self._failure(
                "add", "invalid", key,
                self.formatter.format_invalid("add", key, result.error),
                result.error
            )

        self._contacts.append(result.contact)
        message = self.formatter.format_added(result.contact)
        logger.info(message)
        return OperationResult(
            operation="add", status="success", key=key, message=message, contact=result.contact
        )

    def display_contacts(self) -> List[str]:
        """Rendered line for every contact, in sequence order."""
        return [contact.display_contact() for contact in self._contacts]

    def find_and_edit_contact(self, name: str, updates: Dict[str, Any]) -> OperationResult:
        """
        Overwrite fields on the first contact whose first or last name equals name.

        Only the keys present in updates are written. Values are not
        validated; use find_and_edit_contact_strict for a checked edit.

        Args:
            name: First or last name to match exactly
            updates: Field name (or camelCase alias) to new value

        Returns:
            OperationResult with status success or not_found
        """
        contact = self._find_first(name)
        if contact is None:
            return self._not_found("edit", name)

        for field_name, value in self._resolve_updates(updates).items():
            setattr(contact, field_name, value)

        message = self.formatter.format_updated(contact)
        logger.info(message)
        return OperationResult(operation="edit", status="success", key=name, message=message, contact=contact)

    def find_and_edit_contact_strict(self, name: str, updates: Dict[str, Any]) -> OperationResult:
        """
        Like find_and_edit_contact, but the edited contact must still validate.

        Returns:
            OperationResult with status success, invalid or not_found
        """
        contact = self._find_first(name)
        if contact is None:
            return self._not_found("edit", name)

        resolved = self._resolve_updates(updates)
        try:
            dataclasses.replace(contact, **resolved)
        except ContactValidationError as e:
            return self._failure("edit", "invalid", name, self.formatter.format_invalid("edit", name, e), e)

        for field_name, value in resolved.items():
            setattr(contact, field_name, value)

        message = self.formatter.format_updated(contact)
        logger.info(message)
        return OperationResult(operation="edit", status="success", key=name, message=message, contact=contact)

    def find_and_delete_contact(self, name: str) -> OperationResult:
        """
        Remove the first contact whose first or last name equals name.

        Returns:
            OperationResult with status success or not_found
        """
        index = self._find_first_index(name)
        if index is None:
            return self._not_found("delete", name)

        contact = self._contacts.pop(index)
        message = self.formatter.format_deleted(name)
        logger.info(message)
        return OperationResult(operation="delete", status="success", key=name, message=message, contact=contact)

    def get_contact_count(self) -> int:
        return len(self._contacts)

    def search_by_city_or_state(self, location: str) -> List[Contact]:
        """Contacts whose city or state equals location, in sequence order."""
        return [c for c in self._contacts if c.city == location or c.state == location]

    def view_persons_by_city_or_state(self) -> LocationGrouping:
        """Group rendered contact lines by city and by state."""
        grouping = LocationGrouping()
        for contact in self._contacts:
            line = contact.display_contact()
            grouping.by_city.setdefault(contact.city, []).append(line)
            grouping.by_state.setdefault(contact.state, []).append(line)
        return grouping

    def get_contact_count_by_city_or_state(self) -> LocationCounts:
        """Count contacts per city and per state."""
        counts = LocationCounts()
        for contact in self._contacts:
            counts.by_city[contact.city] = counts.by_city.get(contact.city, 0) + 1
            counts.by_state[contact.state] = counts.by_state.get(contact.state, 0) + 1
        return counts

    def sort_contacts_by_name(self) -> List[str]:
        """
        Sort contacts in place by first name using locale-aware collation.

        The sort is stable: contacts with equal first names keep their
        relative order.

        Returns:
            Rendered contact lines in the new order
        """
        self._contacts.sort(key=lambda c: collation_key(c.first_name))
        lines = self.display_contacts()
        if self.config.log_sorted_contacts:
            logger.info(self.formatter.format_sorted(lines))
        return lines

    def to_dict_list(self) -> List[Dict[str, Any]]:
        """JSON-friendly dump of the contacts in sequence order."""
        return [contact.to_dict() for contact in self._contacts]

    def _find_first_index(self, name: str) -> Optional[int]:
        for index, contact in enumerate(self._contacts):
            if contact.first_name == name or contact.last_name == name:
                return index
        return None

    def _find_first(self, name: str) -> Optional[Contact]:
        index = self._find_first_index(name)
        return None if index is None else self._contacts[index]

    def _resolve_updates(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Map update keys to Contact field names, skipping unknown keys."""
        known_fields = Contact.field_names()
        resolved = {}
        for key, value in updates.items():
            field_name = normalize_field_name(key)
            if field_name not in known_fields:
                logger.warning(f"Ignoring unknown contact field in update: {key}")
                continue
            resolved[field_name] = value
        return resolved

    def _not_found(self, operation: str, name: str) -> OperationResult:
        return self._failure(
            operation, "not_found", name,
            self.formatter.format_not_found(operation, name),
            ContactNotFoundError(name)
        )

    def _failure(self, operation: str, status: str, key: str, message: str,
                 error: Exception) -> OperationResult:
        classification = self.error_classifier.classify_error(error, {"operation": operation, "key": key})
        logger.log(self.error_classifier.get_log_level(classification), message)
        return OperationResult(operation=operation, status=status, key=key, message=message, error=error)
