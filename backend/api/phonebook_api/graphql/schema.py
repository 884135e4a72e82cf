# phonebook_api/graphql/schema.py
"""
Strawberry GraphQL schema definition.
"""
from __future__ import annotations

from typing import Any, Dict

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from phonebook_core.infra.settings import GRAPHIQL_ENABLED, GRAPHQL_PATH
from phonebook_core.utils.logging import get_logger

from phonebook_api.deps import get_contacts_repo
from phonebook_api.graphql.resolvers import Mutation, Query

logger = get_logger(__name__)

# Create the schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


class SchemaValidationError(RuntimeError):
    """Raised when the schema fails validation at startup."""


def validate_schema() -> None:
    """Validate the GraphQL schema, failing fast on unresolved or invalid types."""
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed: %s", message)
        raise SchemaValidationError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed: %s", message)
        raise SchemaValidationError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful")


async def get_context(request: Request) -> Dict[str, Any]:
    """Context handed to every resolver."""
    return {
        "request": request,
        "contacts": get_contacts_repo(request),
    }


def create_graphql_router() -> GraphQLRouter:
    """Create the GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path=GRAPHQL_PATH,
        graphql_ide="graphiql" if GRAPHIQL_ENABLED else None,
        context_getter=get_context,
    )
