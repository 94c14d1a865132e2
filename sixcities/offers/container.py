"""
Composition root for the offer module.

Builds exactly one storage handle, service and controller, wired by
plain constructor calls.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import sessionmaker

from sixcities.config.logging_config import get_logger
from sixcities.storage.database import get_session_factory
from sixcities.offers.controller import OfferController
from sixcities.offers.service import OfferService


@dataclass(frozen=True)
class OfferContainer:
    """Resolved offer components."""
    offer_model: sessionmaker
    offer_service: OfferService
    offer_controller: OfferController


def create_offer_container(
    offer_model: Optional[sessionmaker] = None,
    logger: Optional[logging.Logger] = None
) -> OfferContainer:
    """
    Wire the offer module.

    Args:
        offer_model: Session factory for the offers store (default engine if None)
        logger: Logger handed to the controller

    Returns:
        OfferContainer holding the single instance of each component
    """
    if offer_model is None:
        offer_model = get_session_factory()
    if logger is None:
        logger = get_logger("offers.controller")

    offer_service = OfferService(offer_model)
    offer_controller = OfferController(logger, offer_service)

    return OfferContainer(
        offer_model=offer_model,
        offer_service=offer_service,
        offer_controller=offer_controller,
    )
