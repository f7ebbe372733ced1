"""Unified entry point for the Jokes API and its frontend.

This script launches both the API service and the frontend page
concurrently, the way the backend and the frontend dev server run side
by side during development.

Configuration is read from environment variables:

``HOST`` / ``PORT``
    API bind address and port.  Defaults are ``0.0.0.0`` and ``5000``.

``FRONTEND_HOST`` / ``FRONTEND_PORT``
    Frontend bind address and port.  Defaults are ``0.0.0.0`` and
    ``5173``.

``JOKES_API_URL``
    Where the frontend sends its request.  Defaults to
    ``http://localhost:5000``.

Usage:
    python run.py
"""
import asyncio
import logging
import os
from uvicorn import Config, Server

from jokes_api.app.core.config import settings
from jokes_api.app.main import serve_api
from jokes_frontend import create_frontend_app


async def run_api() -> None:
    """Start the Jokes API using Uvicorn on the resolved port."""
    await serve_api(settings.host, settings.port)


async def run_frontend() -> None:
    """Start the frontend page server.

    Host and port are read from environment variables `FRONTEND_HOST`
    and `FRONTEND_PORT`.
    """
    frontend_host = os.getenv("FRONTEND_HOST", "0.0.0.0")
    frontend_port = int(os.getenv("FRONTEND_PORT", "5173"))
    config = Config(app=create_frontend_app(), host=frontend_host, port=frontend_port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run both servers concurrently."""
    tasks = [asyncio.create_task(run_api()), asyncio.create_task(run_frontend())]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
