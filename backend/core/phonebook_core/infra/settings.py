import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


# HTTP listener
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "4000"))

# GraphQL endpoint
GRAPHQL_PATH = os.getenv("GRAPHQL_PATH", "/")
GRAPHIQL_ENABLED = _flag("GRAPHIQL_ENABLED", "true")

# Preload the demo contacts into a fresh store
SEED_CONTACTS = _flag("SEED_CONTACTS", "true")

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

# Logging
LOG_DIR = os.getenv("LOG_DIR", "./logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
