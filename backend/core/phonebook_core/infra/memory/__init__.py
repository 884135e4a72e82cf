"""In-memory storage for the phonebook."""

from phonebook_core.infra.memory.contacts_repo import ContactsRepoMemory
from phonebook_core.infra.memory.seed import seed_contacts

__all__ = [
    "ContactsRepoMemory",
    "seed_contacts",
]
