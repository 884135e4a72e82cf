# phonebook_api/graphql/types.py
"""
Strawberry GraphQL type definitions.
These types mirror the contact domain model.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

import strawberry


@strawberry.enum
class YesNo(Enum):
    YES = "YES"
    NO = "NO"


@strawberry.type
class Address:
    street: str
    city: str


def _person_address(root: Person) -> Address:
    return Address(street=root.street, city=root.city)


@strawberry.type
class Person:
    name: str
    phone: Optional[str]
    address: Address = strawberry.field(resolver=_person_address)
    id: strawberry.ID

    # Stored on the record but only exposed through ``address``.
    street: strawberry.Private[str]
    city: strawberry.Private[str]
