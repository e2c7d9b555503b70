from fastapi import FastAPI
from typing import Optional, Protocol
import logging

logger = logging.getLogger(__name__)


class SpecProvider(Protocol):
    """Anything that can produce the OpenAPI document on demand."""

    def get_spec(self) -> dict: ...


class FastAPISpecProvider:
    """
    Uses the application's own OpenAPI generator as the spec source.
    The document is built when the reference page is requested, so routes
    added after registration still show up.
    """

    def __init__(self, app: FastAPI):
        self.app = app

    def get_spec(self) -> dict:
        return self.app.openapi()


def detect_spec_provider(app: FastAPI) -> Optional[SpecProvider]:
    """Return a provider for apps that publish an OpenAPI document, else None."""
    if not app.openapi_url:
        logger.debug("OpenAPI generation is disabled on this app, no spec provider available")
        return None
    return FastAPISpecProvider(app)
