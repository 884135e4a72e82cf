"""Command-line client: runs the fixed ``allPersons`` query and prints the list."""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any, Dict, Iterable, List, Optional

import aiohttp

from phonebook_client.config import GRAPHQL_TIMEOUT_SECONDS
from phonebook_client.services.graphql_client import PhonebookAPIError, all_persons
from phonebook_core.utils.logging import get_logger

logger = get_logger(__name__)

LOADING_TEXT = "loading..."
NO_PHONE = "-"


def render_person(person: Dict[str, Any]) -> str:
    line = f"{person['name']}  {person.get('phone') or NO_PHONE}"
    address = person.get("address")
    if address:
        line += f"  {address['street']}, {address['city']}"
    return line


def render_persons(persons: Iterable[Dict[str, Any]]) -> str:
    lines = [render_person(p) for p in persons]
    if not lines:
        return "no persons"
    return "\n".join(lines)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List persons from the phonebook API")
    parser.add_argument(
        "--phone",
        choices=["YES", "NO"],
        help="only persons with (YES) or without (NO) a phone number",
    )
    return parser.parse_args(argv)


async def _run(phone: Optional[str]) -> int:
    print(LOADING_TEXT)
    try:
        persons = await all_persons(phone)
    except PhonebookAPIError as exc:
        logger.error("Query rejected by the API: %s", exc)
        return 1
    except aiohttp.ClientError as exc:
        logger.error("Unable to reach the API: %s", exc)
        return 1
    except asyncio.TimeoutError:
        logger.error("API did not answer within %ss", GRAPHQL_TIMEOUT_SECONDS)
        return 1
    print(render_persons(persons))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    return asyncio.run(_run(args.phone))


if __name__ == "__main__":
    sys.exit(main())
