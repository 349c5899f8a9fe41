"""Process configuration from environment variables (optionally via a .env file)."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

# Repo root: from src/api/settings.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

GraphQLIDE = Literal["graphiql", "apollo-sandbox", "pathfinder"]


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    graphql_ide: GraphQLIDE | None = "graphiql"
    seed_persons: bool = True

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @field_validator("graphql_ide", mode="before")
    @classmethod
    def _ide_off(cls, value):
        if value is None:
            return None
        value = str(value).strip().lower()
        if value in ("", "none", "off", "false", "0"):
            return None
        return value


def load_env_file() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from HOST, PORT, LOG_LEVEL, GRAPHQL_IDE and SEED_PERSONS."""
    env = os.environ if environ is None else environ
    values = {}
    for key in ("HOST", "PORT", "LOG_LEVEL", "GRAPHQL_IDE", "SEED_PERSONS"):
        if key in env:
            values[key.lower()] = env[key].strip()
    return Settings(**values)
