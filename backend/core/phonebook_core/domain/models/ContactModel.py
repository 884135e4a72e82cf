from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from phonebook_core.domain.errors import InvalidContactError
from phonebook_core.domain.id_utils import validate_contact_id


class PhoneFilter(Enum):
    YES = "YES"
    NO = "NO"


@dataclass(frozen=True, slots=True)
class Address:
    street: str
    city: str


@dataclass(slots=True)
class NewContact:
    """Fields accepted when creating a contact; the id is assigned by the store."""

    name: str
    street: str
    city: str
    phone: Optional[str] = None

    def validate_new_contact(self) -> None:
        _require_text("name", self.name)
        _require_text("street", self.street)
        _require_text("city", self.city)


@dataclass(slots=True)
class Contact:
    # Identity
    id: str
    name: str

    # Stored address parts
    street: str
    city: str

    phone: Optional[str] = None

    def address(self) -> Address:
        return Address(street=self.street, city=self.city)

    def has_phone(self) -> bool:
        return bool(self.phone)

    def matches(self, phone_filter: Optional[PhoneFilter]) -> bool:
        if phone_filter is None:
            return True
        if phone_filter is PhoneFilter.YES:
            return self.has_phone()
        return not self.has_phone()

    def validate_contact(self) -> None:
        _require_text("id", self.id)
        if not validate_contact_id(self.id):
            raise InvalidContactError("id", f"id must be a lowercase UUID string: {self.id}")
        _require_text("name", self.name)
        _require_text("street", self.street)
        _require_text("city", self.city)

    @classmethod
    def from_new(cls, contact_id: str, data: NewContact) -> Contact:
        return cls(
            id=contact_id,
            name=data.name,
            street=data.street,
            city=data.city,
            phone=data.phone,
        )


def _require_text(field_name: str, value: Optional[str]) -> None:
    if value is None or not value.strip():
        raise InvalidContactError(field_name, f"{field_name} cannot be empty")
