"""Run the local development server.

Serves ``iris_services.app.main:app`` with Uvicorn so the Lambda
functions can be exercised over HTTP without deploying them.  Point
``DYNAMODB_ENDPOINT_URL`` at DynamoDB Local to keep data off AWS.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from iris_services.app.main import app


async def main() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables `API_HOST` and
    `API_PORT`. Defaults are `127.0.0.1` and `3000`.
    """
    host = os.getenv("API_HOST", "127.0.0.1")
    port = int(os.getenv("API_PORT", "3000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Serving Iris Services on http://%s:%d/api/v1", host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
