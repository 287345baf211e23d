# ABOUTME: Runtime configuration for bookfetch lookups.
# ABOUTME: Resolves the Google Books API key with the environment taking precedence.

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

GOOGLE_BOOKS_ENV_VAR = "GOOGLE_BOOKS"


@dataclass(frozen=True)
class Settings:
    """Explicit configuration passed into the reconciliation engine.

    A None ``google_books_key`` disables the primary catalog, leaving
    Open Library as the only source.
    """

    google_books_key: str | None = None
    max_retries: int = 3
    retry_delay: float = 1.0
    min_request_interval: float = 0.1
    timeout: float = 30.0


def resolve_api_key(
    explicit: str | None, environ: Mapping[str, str] | None = None
) -> str | None:
    """Pick the Google Books API key.

    The GOOGLE_BOOKS environment variable wins when it is non-empty, then the
    explicit setting when it is non-empty. Returns None when neither is set.
    """
    env = os.environ if environ is None else environ
    from_env = env.get(GOOGLE_BOOKS_ENV_VAR, "").strip()
    if from_env:
        return from_env
    if explicit and explicit.strip():
        return explicit.strip()
    return None


def load_settings(
    api_key: str | None = None,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> Settings:
    """Build Settings, resolving the API key against the environment."""
    return Settings(google_books_key=resolve_api_key(api_key, environ), **overrides)
