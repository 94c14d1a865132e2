"""
Offer API Endpoints

HTTP boundary for offers: every handler calls one service method and
projects the result onto a response shape.
"""

import logging
from typing import List

from fastapi import Path, Query, status
from fastapi.responses import JSONResponse

from sixcities.api.controller import BaseController, HttpMethod
from sixcities.api.exceptions import OfferNotFoundError
from sixcities.offers.models import (
    CreateOfferDto, UpdateOfferDto, OfferPreviewRdo, OfferRdo, ErrorRdo
)
from sixcities.offers.projections import to_full, to_previews
from sixcities.offers.service import OfferService


NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorRdo}}


class OfferController(BaseController):
    """Routes for the offer resource."""

    def __init__(self, logger: logging.Logger, offer_service: OfferService):
        super().__init__(logger)
        self.offer_service = offer_service

        self.logger.info("Register routes for OfferController...")

        self.add_route("", HttpMethod.GET, self.index, response_model=List[OfferPreviewRdo])
        self.add_route("", HttpMethod.POST, self.create, response_model=OfferRdo,
                       status_code=status.HTTP_201_CREATED)
        # Must precede /{offerId} so "premium" is not read as an id
        self.add_route("/premium", HttpMethod.GET, self.get_premium_offers,
                       response_model=List[OfferPreviewRdo])
        self.add_route("/{offerId}", HttpMethod.GET, self.get_offer, response_model=OfferRdo,
                       responses=NOT_FOUND_RESPONSE)
        self.add_route("/{offerId}", HttpMethod.PATCH, self.update, response_model=OfferRdo,
                       responses=NOT_FOUND_RESPONSE)
        self.add_route("/{offerId}", HttpMethod.DELETE, self.delete,
                       status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND_RESPONSE)

    def index(self) -> JSONResponse:
        """List all offers."""
        offers = self.offer_service.find_all()
        return self.ok(to_previews(offers))

    def create(self, body: CreateOfferDto) -> JSONResponse:
        """Create an offer."""
        offer = self.offer_service.create(body)
        return self.created(to_full(offer))

    def get_offer(self, offer_id: str = Path(..., alias="offerId")) -> JSONResponse:
        """Get a single offer."""
        offer = self.offer_service.find_by_id(offer_id)
        if offer is None:
            raise OfferNotFoundError(offer_id)

        return self.ok(to_full(offer))

    def update(self, body: UpdateOfferDto, offer_id: str = Path(..., alias="offerId")) -> JSONResponse:
        """Partially update an offer."""
        offer = self.offer_service.update_by_id(offer_id, body)
        if offer is None:
            raise OfferNotFoundError(offer_id)

        return self.ok(to_full(offer))

    def delete(self, offer_id: str = Path(..., alias="offerId")):
        """Delete an offer."""
        if not self.offer_service.exists(offer_id):
            raise OfferNotFoundError(offer_id)

        self.offer_service.delete_by_id(offer_id)
        return self.no_content()

    def get_premium_offers(
        self,
        city_id: str = Query(..., alias="cityId", description="City to list premium offers for")
    ) -> JSONResponse:
        """List premium offers in a city."""
        offers = self.offer_service.find_premium_offers(city_id)
        return self.ok(to_previews(offers))
