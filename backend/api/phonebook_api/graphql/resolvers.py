# phonebook_api/graphql/resolvers.py
"""
GraphQL Query and Mutation resolvers.
"""
from __future__ import annotations

from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from phonebook_core.domain.errors import DuplicateContactError, InvalidContactError
from phonebook_core.domain.models.ContactModel import NewContact
from phonebook_core.infra.memory.contacts_repo import ContactsRepoMemory
from phonebook_core.utils.logging import get_logger

from phonebook_api.graphql.converters import (
    domain_contact_to_gql,
    gql_phone_filter_to_domain,
    unset_to_none,
)
from phonebook_api.graphql.types import Person, YesNo

logger = get_logger(__name__)

BAD_USER_INPUT = "BAD_USER_INPUT"


def _contacts(info: Info) -> ContactsRepoMemory:
    return info.context["contacts"]


def _bad_input(message: str, invalid_args: str) -> GraphQLError:
    return GraphQLError(
        message,
        extensions={"code": BAD_USER_INPUT, "invalidArgs": invalid_args},
    )


# =============================================================================
# Query Resolvers
# =============================================================================

@strawberry.type
class Query:
    @strawberry.field
    async def person_count(self, info: Info) -> int:
        """Number of stored contacts."""
        return await _contacts(info).count()

    @strawberry.field
    async def all_persons(
        self, info: Info, phone: Optional[YesNo] = strawberry.UNSET
    ) -> List[Person]:
        """All contacts, optionally only those with (YES) or without (NO) a phone."""
        contacts = await _contacts(info).list_all(gql_phone_filter_to_domain(phone))
        return [domain_contact_to_gql(c) for c in contacts]

    @strawberry.field
    async def find_person(self, info: Info, name: str) -> Optional[Person]:
        """Get a contact by exact name."""
        contact = await _contacts(info).get_by_name(name)
        if contact:
            return domain_contact_to_gql(contact)
        return None


# =============================================================================
# Mutation Resolvers
# =============================================================================

@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_person(
        self,
        info: Info,
        *,
        name: str,
        phone: Optional[str] = strawberry.UNSET,
        street: str,
        city: str,
    ) -> Optional[Person]:
        """Create a new contact."""
        data = NewContact(name=name, street=street, city=city, phone=unset_to_none(phone))
        try:
            contact = await _contacts(info).add(data)
        except DuplicateContactError as exc:
            logger.event("contact_duplicate_rejected", name=exc.name)
            raise _bad_input("Name must be unique", exc.name) from exc
        except InvalidContactError as exc:
            raise _bad_input(str(exc), exc.field) from exc

        logger.contact("contact_added", contact)
        return domain_contact_to_gql(contact)

    @strawberry.mutation
    async def edit_number(self, info: Info, name: str, phone: str) -> Optional[Person]:
        """Replace the phone number of an existing contact."""
        contact = await _contacts(info).update_phone(name, phone)
        if contact is None:
            return None

        logger.contact("contact_phone_updated", contact)
        return domain_contact_to_gql(contact)
