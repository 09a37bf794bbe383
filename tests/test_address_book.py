"""
Unit tests for the AddressBook collection manager.

Tests duplicate detection, first-match edit and delete, location queries,
grouping and counting, and the non-fatal reporting of failed operations.
"""

import logging

import pytest

from src.address_book.address_book import AddressBook
from src.config.config_manager import AddressBookConfig
from src.error_handling.contact_errors import (
    DuplicateContactError, ContactNotFoundError, InvalidZipError, InvalidPhoneError
)
from src.models.book_models import OperationResult, LocationGrouping, LocationCounts
from src.models.contact_models import Contact


def add(book, first_name, last_name="Sharma", address="Mathura", city="CityName",
        state="UttarPradesh", zip_code="281001", phone="1234567890", email=None):
    """Add a contact with the demo defaults."""
    return book.add_contact(
        first_name, last_name, address, city, state, zip_code, phone,
        email or f"{first_name.lower()}@gmail.com"
    )


class TestAddContact:
    """Test contact insertion."""

    def setup_method(self):
        """Set up test fixtures."""
        self.book = AddressBook()

    def test_add_appends_in_insertion_order(self):
        """Contacts are kept in the order they were added."""
        for name in ["Dheeraj", "Abc", "Priyanshu"]:
            result = add(self.book, name)
            assert isinstance(result, OperationResult)
            assert result.status == "success"
            assert result.ok is True

        assert [c.first_name for c in self.book.contacts] == ["Dheeraj", "Abc", "Priyanshu"]
        assert self.book.get_contact_count() == 3

    def test_add_returns_the_new_contact(self):
        result = add(self.book, "Dheeraj")

        assert isinstance(result.contact, Contact)
        assert result.contact.display_contact() == (
            "Dheeraj Sharma, Mathura, CityName, UttarPradesh, 281001, "
            "Phone: 1234567890, Email: dheeraj@gmail.com"
        )
        assert result.key == "Dheeraj Sharma"
        assert result.error is None

    def test_duplicate_name_pair_is_rejected(self):
        """Adding an identical first/last name pair leaves the book unchanged."""
        add(self.book, "Dheeraj")
        before = self.book.to_dict_list()

        result = add(self.book, "Dheeraj", city="OtherCity")

        assert result.status == "duplicate"
        assert isinstance(result.error, DuplicateContactError)
        assert result.contact is None
        assert self.book.get_contact_count() == 1
        assert self.book.to_dict_list() == before

    def test_duplicate_check_runs_before_validation(self):
        """A duplicate is reported as duplicate even when its other fields are invalid."""
        add(self.book, "Dheeraj")

        result = add(self.book, "Dheeraj", zip_code="bad")

        assert result.status == "duplicate"

    def test_duplicate_check_is_case_sensitive(self):
        add(self.book, "Dheeraj")

        result = add(self.book, "DHeeraj")

        assert result.status == "success"
        assert self.book.get_contact_count() == 2

    def test_same_first_name_different_last_name_is_allowed(self):
        add(self.book, "Dheeraj")

        result = add(self.book, "Dheeraj", last_name="Kumar")

        assert result.status == "success"
        assert self.book.get_contact_count() == 2

    def test_invalid_contact_is_reported_not_raised(self):
        """Validation failures become an invalid result and nothing is added."""
        result = add(self.book, "Dheeraj", zip_code="28100")

        assert result.status == "invalid"
        assert isinstance(result.error, InvalidZipError)
        assert "ZIP" in result.message
        assert self.book.get_contact_count() == 0

    def test_retry_after_invalid_add_succeeds(self):
        add(self.book, "Dheeraj", phone="123")

        result = add(self.book, "Dheeraj")

        assert result.status == "success"
        assert self.book.get_contact_count() == 1


class TestEditContact:
    """Test find-and-edit semantics."""

    def setup_method(self):
        """Set up test fixtures."""
        self.book = AddressBook()
        for name in ["Dheeraj", "Abc", "Priyanshu", "Xyz"]:
            add(self.book, name)

    def test_edit_updates_only_given_fields(self):
        """Only the mentioned fields change, on the matching contact only."""
        before = {c.first_name: c.to_dict() for c in self.book.contacts}

        result = self.book.find_and_edit_contact("Xyz", {"city": "NewCity", "phone": "9876543210"})

        assert result.status == "success"
        after = {c.first_name: c.to_dict() for c in self.book.contacts}
        expected_xyz = dict(before["Xyz"], city="NewCity", phone="9876543210")
        assert after["Xyz"] == expected_xyz
        for name in ["Dheeraj", "Abc", "Priyanshu"]:
            assert after[name] == before[name]

    def test_edit_modifies_contact_in_place(self):
        xyz = self.book.contacts[3]

        self.book.find_and_edit_contact("Xyz", {"city": "NewCity"})

        assert xyz.city == "NewCity"
        assert [c.first_name for c in self.book.contacts] == ["Dheeraj", "Abc", "Priyanshu", "Xyz"]

    def test_edit_matches_first_contact_by_last_name(self):
        """A last-name key hits the first contact in sequence order."""
        result = self.book.find_and_edit_contact("Sharma", {"email": "first@gmail.com"})

        assert result.status == "success"
        assert result.contact.first_name == "Dheeraj"
        assert [c.email for c in self.book.contacts][1:] == [
            "abc@gmail.com", "priyanshu@gmail.com", "xyz@gmail.com"
        ]

    def test_edit_skips_validation(self):
        """The lenient edit accepts values the constructor would reject."""
        result = self.book.find_and_edit_contact("Abc", {"zip_code": "bad", "first_name": "a"})

        assert result.status == "success"
        assert self.book.contacts[1].zip_code == "bad"
        assert self.book.contacts[1].first_name == "a"

    def test_edit_accepts_original_field_names(self):
        self.book.find_and_edit_contact("Abc", {"firstName": "Abcd", "zip": "110001"})

        contact = self.book.contacts[1]
        assert contact.first_name == "Abcd"
        assert contact.zip_code == "110001"

    def test_edit_ignores_unknown_fields(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = self.book.find_and_edit_contact("Abc", {"nickname": "A", "city": "Delhi"})

        assert result.status == "success"
        assert self.book.contacts[1].city == "Delhi"
        assert not hasattr(self.book.contacts[1], "nickname")
        assert "nickname" in caplog.text

    def test_edit_not_found_leaves_book_unchanged(self):
        before = self.book.to_dict_list()

        result = self.book.find_and_edit_contact("Nobody", {"city": "NewCity"})

        assert result.status == "not_found"
        assert isinstance(result.error, ContactNotFoundError)
        assert self.book.to_dict_list() == before

    def test_strict_edit_rejects_invalid_values(self):
        before = self.book.to_dict_list()

        result = self.book.find_and_edit_contact_strict("Xyz", {"city": "NewCity", "phone": "123"})

        assert result.status == "invalid"
        assert isinstance(result.error, InvalidPhoneError)
        assert self.book.to_dict_list() == before

    def test_strict_edit_applies_valid_values(self):
        xyz = self.book.contacts[3]

        result = self.book.find_and_edit_contact_strict("Xyz", {"city": "NewCity", "phone": "9876543210"})

        assert result.status == "success"
        assert result.contact is xyz
        assert xyz.city == "NewCity"
        assert xyz.phone == "9876543210"

    def test_strict_edit_not_found(self):
        result = self.book.find_and_edit_contact_strict("Nobody", {"city": "NewCity"})

        assert result.status == "not_found"


class TestDeleteContact:
    """Test find-and-delete semantics."""

    def setup_method(self):
        """Set up test fixtures."""
        self.book = AddressBook()

    def test_delete_by_first_name(self):
        """Deleting Abc leaves exactly the Dheeraj contact."""
        add(self.book, "Dheeraj")
        add(self.book, "Abc")

        result = self.book.find_and_delete_contact("Abc")

        assert result.status == "success"
        assert result.contact.first_name == "Abc"
        assert self.book.get_contact_count() == 1
        assert [c.first_name for c in self.book.contacts] == ["Dheeraj"]

    def test_delete_removes_only_first_match(self):
        add(self.book, "Ravi", last_name="Sharma")
        add(self.book, "Sharma", last_name="Kumar")
        add(self.book, "Mohan", last_name="Sharma")

        self.book.find_and_delete_contact("Sharma")

        assert [(c.first_name, c.last_name) for c in self.book.contacts] == [
            ("Sharma", "Kumar"), ("Mohan", "Sharma")
        ]

    def test_delete_preserves_order_of_remaining(self):
        for name in ["Aaa", "Bbb", "Ccc", "Ddd"]:
            add(self.book, name, last_name=name + "x")

        self.book.find_and_delete_contact("Bbb")

        assert [c.first_name for c in self.book.contacts] == ["Aaa", "Ccc", "Ddd"]

    def test_delete_not_found_leaves_book_unchanged(self):
        add(self.book, "Dheeraj")
        before = self.book.to_dict_list()

        result = self.book.find_and_delete_contact("Nobody")

        assert result.status == "not_found"
        assert result.contact is None
        assert self.book.to_dict_list() == before

    def test_delete_from_empty_book(self):
        result = self.book.find_and_delete_contact("Dheeraj")

        assert result.status == "not_found"
        assert self.book.get_contact_count() == 0


class TestQueries:
    """Test display, search, grouping and counting."""

    def setup_method(self):
        """Set up test fixtures."""
        self.book = AddressBook()
        add(self.book, "Dheeraj")
        add(self.book, "Priyanshu", city="Agra")
        add(self.book, "Xyz", city="NewCity")
        add(self.book, "Sohan", state="Agra")

    def test_display_contacts_in_sequence_order(self):
        lines = self.book.display_contacts()

        assert len(lines) == 4
        assert lines[0].startswith("Dheeraj Sharma, ")
        assert lines[3] == (
            "Sohan Sharma, Mathura, CityName, Agra, 281001, "
            "Phone: 1234567890, Email: sohan@gmail.com"
        )

    def test_display_empty_book(self):
        assert AddressBook().display_contacts() == []

    def test_search_matches_city_or_state(self):
        """Contacts whose city or state is Agra, in sequence order."""
        matches = self.book.search_by_city_or_state("Agra")

        assert [c.first_name for c in matches] == ["Priyanshu", "Sohan"]

    def test_search_does_not_match_address(self):
        assert self.book.search_by_city_or_state("Mathura") == []

    def test_search_is_exact(self):
        assert self.book.search_by_city_or_state("agra") == []

    def test_count_matches_sequence_length(self):
        assert self.book.get_contact_count() == len(self.book) == len(self.book.contacts) == 4

    def test_view_persons_by_city_or_state(self):
        grouping = self.book.view_persons_by_city_or_state()
        lines = self.book.display_contacts()

        assert isinstance(grouping, LocationGrouping)
        assert list(grouping.by_city) == ["CityName", "Agra", "NewCity"]
        assert grouping.by_city["CityName"] == [lines[0], lines[3]]
        assert grouping.by_state == {"UttarPradesh": lines[:3], "Agra": [lines[3]]}

    def test_every_contact_appears_once_per_mapping(self):
        grouping = self.book.view_persons_by_city_or_state()
        count = self.book.get_contact_count()

        assert sum(len(members) for members in grouping.by_city.values()) == count
        assert sum(len(members) for members in grouping.by_state.values()) == count

    def test_count_by_city_or_state(self):
        counts = self.book.get_contact_count_by_city_or_state()

        assert isinstance(counts, LocationCounts)
        assert counts.by_city == {"CityName": 2, "Agra": 1, "NewCity": 1}
        assert counts.by_state == {"UttarPradesh": 3, "Agra": 1}

    def test_queries_do_not_mutate(self):
        before = self.book.to_dict_list()

        self.book.display_contacts()
        self.book.search_by_city_or_state("Agra")
        self.book.view_persons_by_city_or_state()
        self.book.get_contact_count_by_city_or_state()

        assert self.book.to_dict_list() == before

    def test_contacts_property_is_a_copy(self):
        self.book.contacts.clear()

        assert self.book.get_contact_count() == 4


class TestReporting:
    """Failed operations are logged at the level picked by the classifier."""

    def test_duplicate_logged_as_warning(self, caplog):
        book = AddressBook()
        add(book, "Dheeraj")

        with caplog.at_level(logging.INFO):
            add(book, "Dheeraj")

        records = [r for r in caplog.records if "Duplicate" in r.getMessage()]
        assert records and records[0].levelno == logging.WARNING

    def test_not_found_logged_as_info(self, caplog):
        book = AddressBook()

        with caplog.at_level(logging.INFO):
            book.find_and_delete_contact("Nobody")

        records = [r for r in caplog.records if "Nobody" in r.getMessage()]
        assert records and records[0].levelno == logging.INFO

    def test_success_message_omits_details_when_configured(self):
        book = AddressBook(config=AddressBookConfig(log_contact_details=False))

        result = add(book, "Dheeraj")

        assert result.message == "Contact added successfully."

    def test_success_message_includes_details_by_default(self):
        result = add(AddressBook(), "Dheeraj")

        assert result.message.startswith("Contact added successfully: Dheeraj Sharma")

    def test_operation_result_rejects_unknown_status(self):
        with pytest.raises(ValueError, match="Invalid status"):
            OperationResult(operation="add", status="maybe", key="x", message="")
