"""Configuration management for the address book."""

from .config_manager import ConfigManager, AddressBookConfig

__all__ = ["ConfigManager", "AddressBookConfig"]
