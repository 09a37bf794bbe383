"""Address book collection manager."""

from .address_book import AddressBook
from .collation import collation_key

__all__ = ["AddressBook", "collation_key"]
