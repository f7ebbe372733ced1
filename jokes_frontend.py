"""Presentation client for the Jokes API.

The page shows a fixed heading, the number of jokes it holds and one
block per joke.  Its only state is the current joke list:

* it starts empty;
* :meth:`JokesPage.mount` requests ``/api/jokes`` once and, on success,
  replaces the list with the response body as received;
* on failure the error is logged and the list stays empty.  No retry is
  attempted and nothing about the failure is shown on the page.

:func:`create_frontend_app` serves the page over HTTP.  Each ``GET /``
is one page load: a fresh :class:`JokesPage` is mounted and rendered.

The frontend expects a small set of environment variables:

``JOKES_API_URL``
    Base URL of the Jokes API.  Defaults to ``http://localhost:5000``.

``FRONTEND_HOST`` / ``FRONTEND_PORT``
    Where the page is served.  Defaults are ``0.0.0.0`` and ``5173``.

``LOG_LEVEL`` / ``LOG_FILE``
    Logging level (``INFO`` by default) and optional log file, shared
    with the API service.
"""

from __future__ import annotations

import html
import logging
import os
from typing import Any, Callable, List, Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from jokes_api.app.core.config import Settings
from jokes_api.app.core.logging_config import setup_logging
from jokes_client import JokesAPI


logger = logging.getLogger(__name__)

PAGE_TITLE = "Production Level Backend Setup"


def _field(joke: Any, name: str) -> str:
    """Return ``joke[name]`` as text, or ``""`` when the item has no such field."""
    if isinstance(joke, dict) and joke.get(name) is not None:
        return str(joke[name])
    return ""


class JokesPage:
    """View that fetches the joke list once and renders it as HTML."""

    def __init__(self, api: JokesAPI) -> None:
        self.api = api
        self.jokes: List[Any] = []
        self._mounted = False

    def mount(self) -> None:
        """Load the joke list.

        Only the first call talks to the API; later calls return
        immediately whatever the outcome of the first one was.
        """
        if self._mounted:
            return
        self._mounted = True
        data, error = self.api.list_jokes()
        if error:
            logger.error("Error fetching jokes: %s", error.get("message"))
            return
        if not isinstance(data, list):
            logger.error("Error fetching jokes: expected a list, got %s", type(data).__name__)
            return
        logger.info("Received data: %s", data)
        self.jokes = data

    def render(self) -> str:
        """Return the page as an HTML document."""
        blocks = "".join(
            '<div data-key="{key}"><h3>{title}</h3><h5>{content}</h5></div>'.format(
                key=index,
                title=html.escape(_field(joke, "title")),
                content=html.escape(_field(joke, "content")),
            )
            for index, joke in enumerate(self.jokes)
        )
        return (
            "<!doctype html>"
            '<html lang="en"><head><meta charset="UTF-8">'
            f"<title>{PAGE_TITLE}</title></head>"
            "<body><div>"
            f"<h1>{PAGE_TITLE}</h1>"
            f"<h2>JOKES : {len(self.jokes)}</h2>"
            f"{blocks}"
            "</div></body></html>"
        )


def create_frontend_app(api_factory: Optional[Callable[[], JokesAPI]] = None) -> FastAPI:
    """Create the FastAPI application serving the jokes page.

    ``api_factory`` builds the client used for each page load; it
    defaults to :class:`JokesAPI` configured from the environment.
    """
    factory = api_factory or JokesAPI
    app = FastAPI(title="Jokes Frontend", docs_url=None, redoc_url=None, openapi_url=None)

    # A sync handler: FastAPI runs it in the threadpool, so the blocking
    # request to the API does not stall the event loop.
    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        page = JokesPage(factory())
        page.mount()
        return page.render()

    return app


def main() -> None:
    import uvicorn

    setup_logging(Settings())
    host = os.getenv("FRONTEND_HOST", "0.0.0.0")
    port = int(os.getenv("FRONTEND_PORT", "5173"))
    logger.info("Starting frontend on port %s", port)
    uvicorn.run(create_frontend_app(), host=host, port=port)


if __name__ == "__main__":
    main()
