"""
Custom Exceptions for the Six Cities API
"""

from typing import Any, Optional
from fastapi import HTTPException, status


class HttpError(HTTPException):
    """HTTP error carrying a message and the component that raised it."""

    def __init__(self, status_code: int, message: str, source: Optional[Any] = None):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.source = source


class OfferNotFoundError(HttpError):
    """Offer not found."""

    def __init__(self, offer_id: str, source: str = "OfferController"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            message=f"Offer with id {offer_id} not found.",
            source=source
        )
        self.offer_id = offer_id
