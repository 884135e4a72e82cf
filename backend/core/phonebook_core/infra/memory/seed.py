# phonebook_core/infra/memory/seed.py
"""
Contacts loaded into a fresh store at process start.
"""
from __future__ import annotations

from typing import List

from phonebook_core.domain.models.ContactModel import Contact


def seed_contacts() -> List[Contact]:
    """Return new copies of the seed contacts, in their fixed order."""
    return [
        Contact(
            name="Arto Hellas",
            phone="040-123543",
            street="Tapiolankatu 5 A",
            city="Espoo",
            id="3d594650-3436-11e9-bc57-8b80ba54c431",
        ),
        Contact(
            name="Matti Luukkainen",
            phone="040-432342",
            street="Malminkaari 10 A",
            city="Helsinki",
            id="3d599470-3436-11e9-bc57-8b80ba54c431",
        ),
        Contact(
            name="Venla Ruuska",
            street="Nallemäentie 22 C",
            city="Helsinki",
            id="3d599471-3436-11e9-bc57-8b80ba54c431",
        ),
    ]
