import pytest

from phonebook_core.domain.models.ContactModel import Contact, NewContact
from phonebook_core.infra.memory.contacts_repo import ContactsRepoMemory

ARTO_ID = "3d594650-3436-11e9-bc57-8b80ba54c431"


@pytest.fixture
def contacts() -> ContactsRepoMemory:
    return ContactsRepoMemory.seeded()


@pytest.fixture
def empty_contacts() -> ContactsRepoMemory:
    return ContactsRepoMemory()


@pytest.fixture
def pekka() -> NewContact:
    return NewContact(
        name="Pekka Mikkola",
        phone="045-2374321",
        street="Vilppulantie 25",
        city="Helsinki",
    )


@pytest.fixture
def arto() -> Contact:
    return Contact(
        id=ARTO_ID,
        name="Arto Hellas",
        phone="040-123543",
        street="Tapiolankatu 5 A",
        city="Espoo",
    )
