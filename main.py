from fastapi import FastAPI
from api_reference import register_api_reference
import logging
import os


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Demo application: a health endpoint plus the API reference, fed by the
    app's own OpenAPI document.
    """
    app = FastAPI(title="API Reference Demo")

    @app.get("/health")
    async def health_check():
        """
        Health check endpoint for monitoring and load balancers.
        """
        return {"status": "healthy"}

    route_prefix = os.getenv("API_REFERENCE_PREFIX", "/reference")
    if not register_api_reference(app, route_prefix=route_prefix):
        logger.warning("API reference is not available")

    return app


app = create_app()
