"""Message formatting for address book operation outcomes."""

from typing import List, Optional

from ..models.contact_models import Contact
from ..models.book_models import LocationGrouping, LocationCounts


class OperationMessageFormatter:
    """Formats report messages for each operation outcome."""

    def __init__(self, include_contact_details: bool = True):
        """Initialize the formatter.

        Args:
            include_contact_details: Append the rendered contact line to success messages
        """
        self.include_contact_details = include_contact_details

    def format_added(self, contact: Contact) -> str:
        return self._with_details("Contact added successfully", contact)

    def format_updated(self, contact: Contact) -> str:
        return self._with_details("Contact updated successfully", contact)

    @staticmethod
    def format_deleted(name: str) -> str:
        return f"Contact '{name}' deleted successfully."

    @staticmethod
    def format_duplicate(first_name: str, last_name: str) -> str:
        return f"Duplicate contact entry detected for '{first_name} {last_name}'. Contact not added."

    @staticmethod
    def format_invalid(operation: str, key: str, error: Exception) -> str:
        return f"Error during {operation} for '{key}': {error}"

    @staticmethod
    def format_not_found(operation: str, name: str) -> str:
        return f"Contact '{name}' not found. Nothing to {operation}."

    @staticmethod
    def format_sorted(lines: List[str]) -> str:
        """Format the listing logged after a sort.

        Args:
            lines: Rendered contact lines in their new order

        Returns:
            Multi-line listing, one numbered contact per line
        """
        if not lines:
            return "Sorted Contacts: (none)"
        listing = "\n".join(f"{index}. {line}" for index, line in enumerate(lines, start=1))
        return f"Sorted Contacts:\n{listing}"

    @staticmethod
    def format_grouping(grouping: LocationGrouping) -> str:
        """Format persons grouped by city and state as an indented report."""
        sections = [
            OperationMessageFormatter._format_section("City", grouping.by_city),
            OperationMessageFormatter._format_section("State", grouping.by_state),
        ]
        return "\n\n".join(sections)

    @staticmethod
    def format_counts(counts: LocationCounts) -> str:
        """Format contact counts by city and state."""
        city_lines = [f"- {city}: {count}" for city, count in counts.by_city.items()]
        state_lines = [f"- {state}: {count}" for state, count in counts.by_state.items()]
        return "\n".join(
            ["Count by City:"] + (city_lines or ["- (none)"])
            + ["Count by State:"] + (state_lines or ["- (none)"])
        )

    def _with_details(self, headline: str, contact: Optional[Contact]) -> str:
        if self.include_contact_details and contact is not None:
            return f"{headline}: {contact.display_contact()}"
        return f"{headline}."

    @staticmethod
    def _format_section(label: str, groups) -> str:
        if not groups:
            return f"By {label}:\n- (none)"
        lines = [f"By {label}:"]
        for key, members in groups.items():
            lines.append(f"- {key} ({len(members)}):")
            lines.extend(f"    {member}" for member in members)
        return "\n".join(lines)
