"""Configuration management utilities."""

from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional
import os

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ENV_PREFIX = "ADDRESS_BOOK_"


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class AddressBookConfig:
    """Address book reporting configuration."""
    log_level: str = "INFO"
    log_contact_details: bool = True
    log_sorted_contacts: bool = True

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}")
        self.log_level = self.log_level.upper()
        if not isinstance(self.log_contact_details, bool):
            raise TypeError("log_contact_details must be a boolean")
        if not isinstance(self.log_sorted_contacts, bool):
            raise TypeError("log_sorted_contacts must be a boolean")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "log_level": self.log_level,
            "log_contact_details": self.log_contact_details,
            "log_sorted_contacts": self.log_sorted_contacts
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddressBookConfig":
        """Create configuration from dictionary."""
        return cls(
            log_level=data.get("log_level", "INFO"),
            log_contact_details=data.get("log_contact_details", True),
            log_sorted_contacts=data.get("log_sorted_contacts", True)
        )


class ConfigManager:
    """Manages address book configuration with validation."""

    def __init__(self):
        """Initialize configuration manager."""
        self._config: Optional[AddressBookConfig] = None

    def load_config(self, config_data: Dict[str, Any]) -> AddressBookConfig:
        """Load and validate configuration from dictionary."""
        try:
            self._config = AddressBookConfig.from_dict(config_data)
            return self._config
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid configuration: {e}")

    def load_from_env(self, environ: Optional[Mapping[str, str]] = None) -> AddressBookConfig:
        """Load configuration from ADDRESS_BOOK_* environment variables."""
        environ = os.environ if environ is None else environ
        config_data: Dict[str, Any] = {}

        log_level = environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level is not None:
            config_data["log_level"] = log_level

        try:
            for key in ("log_contact_details", "log_sorted_contacts"):
                raw = environ.get(f"{ENV_PREFIX}{key.upper()}")
                if raw is not None:
                    config_data[key] = _parse_bool(raw)
        except ValueError as e:
            raise ValueError(f"Invalid configuration: {e}")

        return self.load_config(config_data)

    def get_config(self) -> Optional[AddressBookConfig]:
        """Get current configuration."""
        return self._config

    def validate_config(self, config_data: Dict[str, Any]) -> bool:
        """Validate configuration without loading it."""
        try:
            AddressBookConfig.from_dict(config_data)
            return True
        except (ValueError, TypeError):
            return False

    def update_config(self, updates: Dict[str, Any]) -> AddressBookConfig:
        """Update existing configuration with new values."""
        if self._config is None:
            raise ValueError("No configuration loaded")

        current_dict = self._config.to_dict()
        current_dict.update(updates)

        return self.load_config(current_dict)
