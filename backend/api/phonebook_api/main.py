from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from phonebook_api.graphql.schema import create_graphql_router, validate_schema
from phonebook_core.infra.memory.contacts_repo import ContactsRepoMemory
from phonebook_core.infra.settings import (
    API_HOST,
    API_PORT,
    CORS_ALLOW_ORIGINS,
    LOG_DIR,
    SEED_CONTACTS,
)
from phonebook_core.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    validate_schema()
    count = await app.state.contacts_repo.count()
    logger.event("contacts_ready", count=count)
    yield
    logger.info("Shutting down phonebook API")


def create_app(contacts: Optional[ContactsRepoMemory] = None) -> FastAPI:
    """Build the API around ``contacts``, or a fresh store when none is given."""
    if contacts is None:
        contacts = ContactsRepoMemory.seeded() if SEED_CONTACTS else ContactsRepoMemory()

    app = FastAPI(
        title="Phonebook API",
        version="1.0.0",
        description="GraphQL API over an in-memory phonebook",
        lifespan=lifespan,
    )
    app.state.contacts_repo = contacts

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    # GraphQL endpoint
    app.include_router(create_graphql_router())

    return app


def run() -> None:
    import uvicorn

    log_path = configure_logging(Path(LOG_DIR))
    if log_path:
        logger.info("Writing API log to %s", log_path)
    logger.info("Starting phonebook API on %s:%s", API_HOST, API_PORT)
    uvicorn.run(create_app(), host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    run()
