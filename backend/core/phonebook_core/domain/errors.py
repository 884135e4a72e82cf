from __future__ import annotations


class ContactError(Exception):
    """Base class for contact store failures."""


class DuplicateContactError(ContactError):
    """Raised when a contact is created with a name the store already holds."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Name must be unique: {name}")


class DuplicateContactIdError(ContactError):
    """Raised when a store is built from records that share an id."""

    def __init__(self, contact_id: str):
        self.contact_id = contact_id
        super().__init__(f"Contact id must be unique: {contact_id}")


class InvalidContactError(ContactError, ValueError):
    """A contact field failed validation; ``field`` names the offending one."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)
