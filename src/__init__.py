"""Address Book: validated contact records and collection operations."""
