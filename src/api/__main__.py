"""
Serve the GraphQL API.
Run: python -m api (from repo root, with .env or env vars set).
"""

import uvicorn

from api.main import app, settings


def main() -> None:
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
