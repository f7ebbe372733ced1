"""
Main entrypoint for the Jokes API.

This module assembles the FastAPI application, sets up logging and
includes the router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn, e.g.::

    uvicorn jokes_api.app.main:app --port 5000

or directly with ``python -m jokes_api.app.main``, which honours the
``PORT`` environment variable.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.joke_service import JokeService

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to build the app from.  Defaults to the module level
        ``settings`` read from the environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings

    # Initialise logging before anything else so that the startup hook
    # below has somewhere to write.
    setup_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("%s %s serving %d jokes", app.title, app.version, JokeService.count())
        yield

    app = FastAPI(title=config.project_name, version=config.api_version, lifespan=lifespan)

    if config.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origin_list,
            allow_methods=["GET"],
            allow_headers=["*"],
        )
        logger.info("CORS enabled for origins: %s", ", ".join(config.cors_origin_list))

    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()


async def serve_api(host: str, port: int) -> None:
    """Serve ``app`` with uvicorn until the server stops.

    ``Server running on port`` is logged once uvicorn reports that it
    has started, so nothing is announced when binding the port fails.
    """
    server = uvicorn.Server(uvicorn.Config(app=app, host=host, port=port, reload=False, log_level="info"))
    serve_task = asyncio.create_task(server.serve())
    try:
        while not (server.started or serve_task.done()):
            await asyncio.sleep(0.05)
        if server.started:
            logger.info("Server running on port %s", port)
        await serve_task
    finally:
        if not serve_task.done():
            serve_task.cancel()


if __name__ == "__main__":
    asyncio.run(serve_api(default_settings.host, default_settings.port))
