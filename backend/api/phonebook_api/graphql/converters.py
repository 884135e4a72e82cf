# phonebook_api/graphql/converters.py
"""
Converters between domain models and GraphQL types.
"""
from __future__ import annotations

from typing import Optional

import strawberry

from phonebook_core.domain.models.ContactModel import Contact as DContact
from phonebook_core.domain.models.ContactModel import PhoneFilter as DPhoneFilter

from phonebook_api.graphql.types import Person, YesNo


def domain_contact_to_gql(contact: DContact) -> Person:
    """Convert domain Contact to GraphQL Person type."""
    return Person(
        name=contact.name,
        phone=contact.phone,
        street=contact.street,
        city=contact.city,
        id=strawberry.ID(contact.id),
    )


def gql_phone_filter_to_domain(phone: Optional[YesNo]) -> Optional[DPhoneFilter]:
    if phone is None or phone is strawberry.UNSET:
        return None
    return DPhoneFilter(phone.value)


def unset_to_none(value):
    """Map an omitted optional argument to ``None``."""
    return None if value is strawberry.UNSET else value
