"""Entry point for the Employee Records API.

Runs the FastAPI application under Uvicorn.  Intended to be executed
from the project root, for example inside a container where only a
single Python file is specified::

    python run.py

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables; everything else is configured through the
variables documented in ``employee_api.app.core.config``.
"""
import asyncio
import os

from uvicorn import Config, Server

from employee_api.app.core.config import settings
from employee_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Defaults are ``0.0.0.0`` and ``8080``.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8080"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
