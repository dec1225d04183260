"""
Local development server for Iris Services.

In production every operation is an individual Lambda function behind
API Gateway.  ``create_app`` assembles a FastAPI application that
mounts the same functions under ``/api/v1`` so the API can be run
locally, e.g. against DynamoDB Local::

    DYNAMODB_ENDPOINT_URL=http://localhost:8000 \
        uvicorn iris_services.app.main:app --reload --port 3000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the functions
    # log through the same handlers as the server.
    setup_logging(settings.log_level, logfile=settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
