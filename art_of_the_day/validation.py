"""Acceptance rules for artworks shown on the page."""

from __future__ import annotations

from .errors import RejectionReason, ValidationError
from .models import ArtworkRecord


def rejection_reason(artwork: ArtworkRecord) -> RejectionReason | None:
    """
    Return why an artwork should be rejected, or None if it is acceptable.

    Checks run in a fixed order so the reported reason is deterministic:
    popularity first, then image presence, then licensing.
    """
    if not artwork.viewed_rarely:
        return RejectionReason.VIEWED_TOO_OFTEN
    if not artwork.image_id:
        return RejectionReason.NO_ASSOCIATED_IMAGE
    # Required by AIC's terms of use for reuse
    if not artwork.is_public_domain:
        return RejectionReason.NOT_PUBLIC_DOMAIN
    return None


def is_acceptable(artwork: ArtworkRecord) -> bool:
    return rejection_reason(artwork) is None


def validate(artwork: ArtworkRecord) -> ArtworkRecord:
    """Return the artwork unchanged, or raise ValidationError."""
    reason = rejection_reason(artwork)
    if reason is not None:
        raise ValidationError(reason, artwork.id)
    return artwork
