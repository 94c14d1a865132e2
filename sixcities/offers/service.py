"""
Offer persistence service.

Every operation opens its own session and performs a single round trip
against the store. Errors raised by the store propagate to the caller.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, sessionmaker

from sixcities.storage.schema import Offer
from sixcities.offers.models import CreateOfferDto, UpdateOfferDto


logger = logging.getLogger("sixcities.offers")


def _to_columns(values: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a DTO dump onto offer column names."""
    columns = dict(values)
    location = columns.pop("location", None)
    if location is not None:
        columns["latitude"] = location["latitude"]
        columns["longitude"] = location["longitude"]
    return columns


class OfferService:
    """CRUD operations over the offers table."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _session(self) -> Session:
        return self.session_factory()

    def create(self, payload: CreateOfferDto) -> Offer:
        """
        Persist a new offer.

        Args:
            payload: Validated creation data

        Returns:
            The stored offer with its generated identifier

        Raises:
            sqlalchemy.exc.IntegrityError: If the store rejects the payload
                (e.g. the city does not exist)
        """
        offer = Offer(
            offer_id=uuid.uuid4().hex,
            post_date=datetime.utcnow(),
            **_to_columns(payload.model_dump(mode="json"))
        )

        with self._session() as session:
            session.add(offer)
            session.commit()
            session.refresh(offer)
            # Load the city before the session closes
            offer.city

        logger.info("New offer created: %s", offer.offer_id)
        return offer

    def find_by_id(self, offer_id: str) -> Optional[Offer]:
        with self._session() as session:
            return session.get(Offer, offer_id)

    def exists(self, offer_id: str) -> bool:
        with self._session() as session:
            return session.query(Offer.offer_id).filter(Offer.offer_id == offer_id).first() is not None

    def find_all(self) -> List[Offer]:
        """Return every offer, newest first."""
        with self._session() as session:
            return session.query(Offer).order_by(Offer.post_date.desc()).all()

    def find_premium_offers(self, city_id: str) -> List[Offer]:
        """Return premium offers in the given city, newest first. Unknown cities yield []."""
        with self._session() as session:
            return (
                session.query(Offer)
                .filter(Offer.is_premium.is_(True), Offer.city_id == city_id)
                .order_by(Offer.post_date.desc())
                .all()
            )

    def update_by_id(self, offer_id: str, payload: UpdateOfferDto) -> Optional[Offer]:
        """
        Apply a partial update.

        Only the fields present in the request are written; the identifier
        is never changed.

        Returns:
            The updated offer, or None if no offer has this id
        """
        changes = _to_columns(payload.model_dump(mode="json", exclude_unset=True, exclude_none=True))

        with self._session() as session:
            offer = session.get(Offer, offer_id)
            if offer is None:
                return None

            for column, value in changes.items():
                setattr(offer, column, value)

            session.commit()
            session.refresh(offer)
            offer.city

        logger.info("Offer %s updated (%s)", offer_id, ", ".join(sorted(changes)) or "no changes")
        return offer

    def delete_by_id(self, offer_id: str) -> Optional[Offer]:
        """
        Delete an offer.

        Returns:
            The removed offer, or None when nothing matched
        """
        with self._session() as session:
            offer = session.get(Offer, offer_id)
            if offer is None:
                return None

            session.delete(offer)
            session.commit()

        logger.info("Offer %s deleted", offer_id)
        return offer
