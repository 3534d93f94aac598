"""Abstract base class for artwork sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

import requests

from ..errors import MalformedResponseError, TransportError
from ..models import ArtworkRecord, ImageRecord
from ..validation import validate


class ArtworkSource(ABC):
    """
    Abstract base class for artwork metadata sources.

    Subclasses implement API-specific request and parsing logic while this
    base class provides request plumbing, error translation and logging.
    Every failure leaves here as an ArtFetchError subclass.
    """

    # Subclasses must define these
    name: str = "Unknown Source"  # Full display name
    short_name: str = "UNK"  # Short identifier (e.g., "AIC")
    base_url: str = ""

    # Sent with every request so the API owner can identify the client
    user_agent: str = "art-of-the-day/0.1"
    user_agent_header: str = "User-Agent"

    # Timeouts (can be overridden)
    fetch_timeout: int = 30

    # Logging callback - set by app to integrate with UI logging
    _log_callback: Callable[[str, str], None] | None = None

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def set_logger(self, callback: Callable[[str, str], None]) -> None:
        """Set logging callback. Signature: callback(level, message)."""
        self._log_callback = callback

    def _log(self, level: str, message: str) -> None:
        """Log a message if callback is set."""
        if self._log_callback:
            self._log_callback(level, f"[{self.short_name}] {message}")

    def _log_info(self, message: str) -> None:
        self._log("INFO", message)

    def _log_warning(self, message: str) -> None:
        self._log("WARN", message)

    def _log_error(self, message: str) -> None:
        self._log("ERROR", message)

    def fetch_artwork(self, candidate: int) -> ArtworkRecord:
        """
        Fetch and validate the artwork for a candidate.

        Raises:
            TransportError: request failed or returned an error status
            MalformedResponseError: response was not a readable artwork
            ValidationError: artwork is not suitable for display
        """
        self._log_info(f"Fetching artwork for candidate {candidate}")
        artwork = self._do_fetch_artwork(candidate)
        return validate(artwork)

    def fetch_image(self, artwork: ArtworkRecord) -> ImageRecord:
        """
        Fetch image metadata for an artwork that already passed validation.

        Raises:
            TransportError: request failed or returned an error status
            MalformedResponseError: response was not a readable image record
        """
        self._log_info(f"Fetching image {artwork.image_id} for artwork {artwork.id}")
        return self._do_fetch_image(artwork)

    def _get_json(self, url: str, params: Any = None) -> dict[str, Any]:
        """GET a URL and return the decoded JSON object."""
        try:
            response = self._session.get(
                url,
                params=params,
                headers={self.user_agent_header: self.user_agent},
                timeout=self.fetch_timeout,
            )
            response.raise_for_status()

        except requests.Timeout as e:
            self._log_warning(f"Timeout after {self.fetch_timeout}s")
            raise TransportError(f"{self.name} took too long to respond.") from e

        except requests.ConnectionError as e:
            self._log_warning("Connection failed")
            raise TransportError(
                f"Could not connect to {self.name}. Check your internet connection."
            ) from e

        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            self._log_warning(f"HTTP error: {status if status is not None else 'unknown'}")
            raise TransportError(
                f"{self.name} returned an error (status {status if status is not None else 'unknown'}).",
                status_code=status,
            ) from e

        except requests.RequestException as e:
            self._log_warning(f"Request error: {e}")
            raise TransportError(f"Error communicating with {self.name}.") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{self.name} returned a response that is not JSON.") from e

        if not isinstance(payload, dict):
            raise MalformedResponseError(f"{self.name} returned an unexpected response shape.")
        return payload

    @abstractmethod
    def _do_fetch_artwork(self, candidate: int) -> ArtworkRecord:
        """
        Request and parse the artwork for a candidate.

        Note: Validation is applied by fetch_artwork(), not here.
        """
        pass

    @abstractmethod
    def _do_fetch_image(self, artwork: ArtworkRecord) -> ImageRecord:
        """Request and parse image metadata for a validated artwork."""
        pass

    @staticmethod
    def fields_param(fields: list[str]) -> str:
        """Join API field names for the `fields` query parameter."""
        return ",".join(fields)
