"""Jokes API client.

This module defines a small client wrapper around the Jokes API.  The
client uses the ``requests`` library internally to make HTTP calls and
exposes one high‑level method:

* :meth:`JokesAPI.list_jokes` – return the joke list served at
  ``/api/jokes``.

Paths are relative, exactly as a browser page served from the same
origin would request them.  The client resolves them against
``base_url``, which plays the part of the origin (or of the dev proxy
that forwards ``/api`` to the backend).

Failures are never raised to the caller.  Every method returns a
``(data, error)`` tuple where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` keys otherwise.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"
JOKES_PATH = "/api/jokes"


class JokesAPI:
    """Client for interacting with the Jokes API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:5000``.
                Defaults to the ``JOKES_API_URL`` environment variable,
                then to :data:`DEFAULT_BASE_URL`.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Optional request timeout in seconds.  ``None``
                waits for as long as the server takes.
        """
        base_url = base_url or os.getenv("JOKES_API_URL") or DEFAULT_BASE_URL
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` for everything the API serves).
            path: Path relative to :attr:`base_url` (e.g. ``/api/jokes``).
            params: Query parameters to include in the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            # Covers connection errors and, with requests 2.27+, bodies
            # that are not valid JSON.
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Joke operations
    # ------------------------------------------------------------------
    def list_jokes(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        """Retrieve the joke list.

        The response body is returned verbatim; the client does not
        sort, filter or validate the items.

        Returns:
            A tuple ``(jokes, error)``. ``jokes`` is ``None`` on failure.
        """
        return self._request("GET", JOKES_PATH)
