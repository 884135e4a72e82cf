# phonebook_client/services/graphql_client.py
"""
GraphQL client for the phonebook API.

Each operation the server exposes has a query document and a thin async
wrapper that returns the operation's slice of the response data.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import aiohttp

from phonebook_client.config import GRAPHQL_API_URL, GRAPHQL_TIMEOUT_SECONDS
from phonebook_core.utils.logging import get_logger

logger = get_logger(__name__)


class PhonebookAPIError(Exception):
    """The phonebook API rejected a request.

    ``errors`` holds the GraphQL error objects as sent by the server, and
    ``data`` any partial result delivered alongside them.
    """

    def __init__(self, errors: List[Dict[str, Any]], data: Optional[Dict[str, Any]] = None):
        self.errors = errors
        self.data = data
        super().__init__("; ".join(_describe_error(e) for e in errors))

    @property
    def codes(self) -> List[str]:
        return [_error_code(e) for e in self.errors]


def _error_code(error: Dict[str, Any]) -> str:
    return (error.get("extensions") or {}).get("code", "")


def _describe_error(error: Dict[str, Any]) -> str:
    message = error.get("message", "unknown error")
    code = _error_code(error)
    return f"{message} [{code}]" if code else message


async def _execute_graphql(
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    *,
    url: Optional[str] = None,
    timeout: float = GRAPHQL_TIMEOUT_SECONDS,
) -> Dict[str, Any]:
    """POST one operation and return its ``data``; raise PhonebookAPIError on errors."""
    payload: Dict[str, Any] = {"query": query}
    if variables:
        payload["variables"] = variables

    async with aiohttp.ClientSession() as session:
        async with session.post(
            url or GRAPHQL_API_URL,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as response:
            status = response.status
            # Validation failures may come back as 4xx with a GraphQL body.
            body = await response.json(content_type=None)

    errors = (body or {}).get("errors") or []
    if not errors and status >= 400:
        errors = [{"message": f"HTTP {status}"}]
    if errors:
        raise PhonebookAPIError(errors, (body or {}).get("data"))

    return (body or {}).get("data") or {}



# ─────────────────────────────────────────────────────────────────────────────
# Queries
# ─────────────────────────────────────────────────────────────────────────────

ALL_PERSONS_QUERY = """
query AllPersons($phone: YesNo) {
    allPersons(phone: $phone) {
        name
        phone
        address {
            street
            city
        }
        id
    }
}
"""


async def all_persons(phone: Optional[str] = None) -> List[Dict[str, Any]]:
    """Fetch every contact, optionally filtered by phone presence ("YES"/"NO")."""
    variables = {"phone": phone} if phone else None
    data = await _execute_graphql(ALL_PERSONS_QUERY, variables)
    return data.get("allPersons", [])


PERSON_COUNT_QUERY = """
query PersonCount {
    personCount
}
"""


async def person_count() -> int:
    data = await _execute_graphql(PERSON_COUNT_QUERY)
    return int(data.get("personCount", 0))


FIND_PERSON_QUERY = """
query FindPerson($name: String!) {
    findPerson(name: $name) {
        name
        phone
        address {
            street
            city
        }
        id
    }
}
"""


async def find_person(name: str) -> Optional[Dict[str, Any]]:
    data = await _execute_graphql(FIND_PERSON_QUERY, {"name": name})
    return data.get("findPerson")


# ─────────────────────────────────────────────────────────────────────────────
# Mutations
# ─────────────────────────────────────────────────────────────────────────────

ADD_PERSON_MUTATION = """
mutation AddPerson($name: String!, $phone: String, $street: String!, $city: String!) {
    addPerson(name: $name, phone: $phone, street: $street, city: $city) {
        name
        phone
        address {
            street
            city
        }
        id
    }
}
"""


async def add_person(
    name: str,
    street: str,
    city: str,
    phone: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Create a contact. Raises PhonebookAPIError (BAD_USER_INPUT) for a taken name."""
    variables = {
        "name": name,
        "phone": phone,
        "street": street,
        "city": city,
    }
    data = await _execute_graphql(ADD_PERSON_MUTATION, variables)
    return data.get("addPerson")


EDIT_NUMBER_MUTATION = """
mutation EditNumber($name: String!, $phone: String!) {
    editNumber(name: $name, phone: $phone) {
        name
        phone
        address {
            street
            city
        }
        id
    }
}
"""


async def edit_number(name: str, phone: str) -> Optional[Dict[str, Any]]:
    """Change a contact's phone. Returns None when no contact has that name."""
    data = await _execute_graphql(EDIT_NUMBER_MUTATION, {"name": name, "phone": phone})
    return data.get("editNumber")
