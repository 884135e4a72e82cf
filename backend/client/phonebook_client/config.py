import os

from dotenv import load_dotenv

load_dotenv()

# GraphQL API endpoint
GRAPHQL_API_URL = os.getenv("GRAPHQL_API_URL", "http://localhost:4000/")

GRAPHQL_TIMEOUT_SECONDS = float(os.getenv("GRAPHQL_TIMEOUT_SECONDS", "30"))
