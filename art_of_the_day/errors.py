"""Errors raised while fetching and validating artworks.

Every error here means "try another candidate" to the retry controller.
Only the last one of a cycle is ever shown to the user.
"""

from __future__ import annotations

from enum import Enum


class RejectionReason(Enum):
    """Why an otherwise well-formed artwork was not accepted."""

    VIEWED_TOO_OFTEN = "ViewedTooOften"
    NO_ASSOCIATED_IMAGE = "NoAssociatedImage"
    NOT_PUBLIC_DOMAIN = "NotPublicDomain"


_REJECTION_MESSAGES = {
    RejectionReason.VIEWED_TOO_OFTEN: "Artwork is viewed too often to be a hidden gem.",
    RejectionReason.NO_ASSOCIATED_IMAGE: "Artwork has no associated image.",
    RejectionReason.NOT_PUBLIC_DOMAIN: "Artwork is not in the public domain.",
}


class ArtFetchError(Exception):
    """Base class for a failed fetch attempt."""


class TransportError(ArtFetchError):
    """The request failed or the server answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ArtFetchError):
    """The response could not be read as the expected record."""


class ValidationError(ArtFetchError):
    """The artwork was fetched fine but is not suitable for display."""

    def __init__(self, reason: RejectionReason, artwork_id: int | None = None) -> None:
        message = _REJECTION_MESSAGES[reason]
        if artwork_id is not None:
            message = f"{message} (artwork {artwork_id})"
        super().__init__(message)
        self.reason = reason
        self.artwork_id = artwork_id
