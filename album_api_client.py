"""Album API client.

This module defines a small client wrapper around the Album API
served by ``album_service``.  The client uses the ``requests`` library
internally and exposes one method per endpoint:

* :meth:`list_albums` – return every album.
* :meth:`get_album` – fetch a single album by its identifier.
* :meth:`create_album` – add a new album.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class AlbumAPI:
    """Client for interacting with the Album API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success.  On failure ``data`` is ``None`` and
            ``error`` describes the issue; the message is taken from the
            ``error`` or ``message`` key of the response body when present.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
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
                    message = err_json.get("error") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Album operations
    # ------------------------------------------------------------------
    def list_albums(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all albums."""
        data, error = self._request("GET", "/albums")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_album(self, album_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a single album by ID.

        Args:
            album_id: Identifier of the album.
        Returns:
            A tuple ``(album, error)``.  A missing album yields an error
            with ``status_code`` 404.
        """
        path = "/albums/" + requests.utils.quote(str(album_id), safe="")
        return self._request("GET", path)

    def create_album(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create an album.

        Args:
            payload: Album fields ``id``, ``title``, ``artist`` and ``year``.
        Returns:
            A tuple ``(album, error)``.
        """
        return self._request("POST", "/albums", json_body=payload)
