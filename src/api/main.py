"""
FastAPI backend: GraphQL endpoint over the in-memory person roster.
Run with uvicorn: uvicorn api.main:app --reload  (or: python -m api)
"""

import logging
from contextlib import asynccontextmanager

from api.settings import load_env_file, load_settings

load_env_file()

from fastapi import FastAPI, Request  # noqa: E402
from strawberry.fastapi import GraphQLRouter  # noqa: E402

from api.schema import build_context, schema  # noqa: E402
from persons.infrastructure import (  # noqa: E402
    InMemoryPersonRepository,
    seeded_repository,
)

settings = load_settings()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=settings.log_level,
)
logger = logging.getLogger(__name__)


def _new_repository() -> InMemoryPersonRepository:
    if settings.seed_persons:
        return seeded_repository()
    return InMemoryPersonRepository()


def _get_cached_repository(app: FastAPI) -> InMemoryPersonRepository:
    if getattr(app.state, "repository", None) is None:
        app.state.repository = _new_repository()
    return app.state.repository


@asynccontextmanager
async def lifespan(app: FastAPI):
    repository = _get_cached_repository(app)
    logger.info("Roster loaded with %d persons", repository.count())
    logger.info("Server ready at http://%s:%s/graphql", settings.host, settings.port)
    yield


async def get_context(request: Request) -> dict:
    return build_context(_get_cached_repository(request.app))


graphql_app = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide=settings.graphql_ide,
)

app = FastAPI(title="Persons API", lifespan=lifespan)
app.include_router(graphql_app, prefix="/graphql")


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}
