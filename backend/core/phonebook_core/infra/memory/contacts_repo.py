# phonebook_core/infra/memory/contacts_repo.py
"""
In-memory repository for Contact entities.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional

from phonebook_core.domain.errors import DuplicateContactError, DuplicateContactIdError
from phonebook_core.domain.id_utils import generate_contact_id
from phonebook_core.domain.models.ContactModel import Contact, NewContact, PhoneFilter
from phonebook_core.infra.memory.seed import seed_contacts


class ContactsRepoMemory:
    """Async repository holding contacts in insertion order.

    None of the coroutines await between reading and writing the list, so
    each mutation completes in a single step on the event loop.
    """

    def __init__(self, contacts: Optional[Iterable[Contact]] = None):
        self._contacts: List[Contact] = []
        seen_ids = set()
        for contact in contacts or ():
            contact.validate_contact()
            if contact.id in seen_ids:
                raise DuplicateContactIdError(contact.id)
            seen_ids.add(contact.id)
            if self._find(contact.name) is not None:
                raise DuplicateContactError(contact.name)
            self._contacts.append(replace(contact))

    @classmethod
    def seeded(cls) -> ContactsRepoMemory:
        return cls(seed_contacts())

    async def count(self) -> int:
        return len(self._contacts)

    async def list_all(self, phone_filter: Optional[PhoneFilter] = None) -> List[Contact]:
        return [replace(c) for c in self._contacts if c.matches(phone_filter)]

    async def get_by_name(self, name: str) -> Optional[Contact]:
        contact = self._find(name)
        return replace(contact) if contact else None

    async def get(self, contact_id: str) -> Optional[Contact]:
        for contact in self._contacts:
            if contact.id == contact_id:
                return replace(contact)
        return None

    async def add(self, data: NewContact) -> Contact:
        """
        Append a new contact with a freshly generated id.
        Raises DuplicateContactError if the name is already taken.
        """
        data.validate_new_contact()
        if self._find(data.name) is not None:
            raise DuplicateContactError(data.name)

        taken = {c.id for c in self._contacts}
        contact = Contact.from_new(generate_contact_id(taken), data)
        contact.validate_contact()
        self._contacts.append(contact)
        return replace(contact)

    async def update_phone(self, name: str, phone: str) -> Optional[Contact]:
        """Replace the phone of the named contact. Returns None if absent."""
        contact = self._find(name)
        if contact is None:
            return None
        contact.phone = phone
        return replace(contact)

    def _find(self, name: str) -> Optional[Contact]:
        for contact in self._contacts:
            if contact.name == name:
                return contact
        return None
