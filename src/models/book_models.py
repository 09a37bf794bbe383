"""Address book operation result models."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Literal

from .contact_models import Contact

VALID_STATUSES = ["success", "duplicate", "invalid", "not_found"]


@dataclass
class OperationResult:
    """Outcome of a single address book operation."""
    operation: str
    status: Literal["success", "duplicate", "invalid", "not_found"]
    key: str
    message: str
    contact: Optional[Contact] = None
    error: Optional[Exception] = None

    def __post_init__(self):
        """Validate fields."""
        if not self.operation.strip():
            raise ValueError("operation cannot be empty")
        if self.status not in VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "operation": self.operation,
            "status": self.status,
            "key": self.key,
            "message": self.message,
            "contact": self.contact.display_contact() if self.contact else None
        }


@dataclass
class LocationGrouping:
    """Rendered contact lines grouped by city and by state."""
    by_city: Dict[str, List[str]] = field(default_factory=dict)
    by_state: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class LocationCounts:
    """Contact counts per city and per state."""
    by_city: Dict[str, int] = field(default_factory=dict)
    by_state: Dict[str, int] = field(default_factory=dict)
