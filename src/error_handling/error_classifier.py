"""
Error classification for address book operations.

Maps the non-fatal outcomes of address book operations (validation failures,
duplicate entries, missing contacts) to a category, a severity and a user
facing message, so callers can decide how loudly to report them.
"""

import logging
from enum import Enum
from typing import Dict, Any, Optional
from dataclasses import dataclass

from .contact_errors import (
    ContactValidationError, DuplicateContactError, ContactNotFoundError
)

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for classification and handling."""
    VALIDATION = "validation"    # A contact field group failed its validator
    DUPLICATE = "duplicate"      # First/last name pair already present
    NOT_FOUND = "not_found"      # Name key matched no contact
    UNKNOWN = "unknown"          # Unknown or unclassified errors


class ErrorSeverity(Enum):
    """Severity levels used to pick a log level."""
    LOW = "low"          # Expected miss, log only
    MEDIUM = "medium"    # Rejected input, caller should look at it
    HIGH = "high"        # Unexpected failure


@dataclass
class ErrorClassification:
    """Classification result for an error."""
    category: ErrorCategory
    severity: ErrorSeverity
    field_group: Optional[str] = None
    user_message: Optional[str] = None


class ErrorClassifier:
    """Classifies address book errors and maps them to log levels."""

    # Validation failures keyed by the field group they report
    VALIDATION_MAPPINGS = {
        'name': ErrorClassification(
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            field_group='name',
            user_message="First or last name is invalid"
        ),
        'address': ErrorClassification(
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            field_group='address',
            user_message="Address, city or state is too short"
        ),
        'zip': ErrorClassification(
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            field_group='zip',
            user_message="ZIP code is not a 6-digit number"
        ),
        'phone': ErrorClassification(
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            field_group='phone',
            user_message="Phone number is not a 10-digit number"
        ),
        'email': ErrorClassification(
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            field_group='email',
            user_message="Email address is malformed"
        ),
    }

    SEVERITY_LOG_LEVELS = {
        ErrorSeverity.LOW: logging.INFO,
        ErrorSeverity.MEDIUM: logging.WARNING,
        ErrorSeverity.HIGH: logging.ERROR,
    }

    def classify_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> ErrorClassification:
        """
        Classify an error and determine how it should be reported.

        Args:
            error: The exception to classify
            context: Additional context about the operation

        Returns:
            ErrorClassification with reporting details
        """
        if isinstance(error, ContactValidationError):
            return self._classify_validation_error(error)
        elif isinstance(error, DuplicateContactError):
            return ErrorClassification(
                category=ErrorCategory.DUPLICATE,
                severity=ErrorSeverity.MEDIUM,
                field_group='name',
                user_message=f"A contact named {error.first_name} {error.last_name} already exists"
            )
        elif isinstance(error, ContactNotFoundError):
            return ErrorClassification(
                category=ErrorCategory.NOT_FOUND,
                severity=ErrorSeverity.LOW,
                user_message=f"No contact matches '{error.name}'"
            )
        return self._classify_unknown_error(error, context)

    def _classify_validation_error(self, error: ContactValidationError) -> ErrorClassification:
        """Classify a contact validation failure by its field group."""
        classification = self.VALIDATION_MAPPINGS.get(error.field_group)
        if classification is not None:
            return classification

        logger.warning(f"Unknown validation field group: {error.field_group}")
        return ErrorClassification(
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            field_group=error.field_group,
            user_message=str(error)
        )

    def _classify_unknown_error(self, error: Exception, context: Optional[Dict[str, Any]]) -> ErrorClassification:
        """Classify unknown errors."""
        error_type = type(error).__name__
        logger.warning(f"Classifying unknown error: {error_type} - {error}")

        return ErrorClassification(
            category=ErrorCategory.UNKNOWN,
            severity=ErrorSeverity.HIGH,
            user_message=f"Unknown error: {error_type}"
        )

    def get_log_level(self, classification: ErrorClassification) -> int:
        """Return the logging level matching a classification's severity."""
        return self.SEVERITY_LOG_LEVELS.get(classification.severity, logging.ERROR)
