"""
Offer Module Exports
"""

from .models import CreateOfferDto, UpdateOfferDto, OfferPreviewRdo, OfferRdo, OfferType, Good
from .service import OfferService
from .controller import OfferController
from .container import OfferContainer, create_offer_container

__all__ = [
    'CreateOfferDto', 'UpdateOfferDto', 'OfferPreviewRdo', 'OfferRdo', 'OfferType', 'Good',
    'OfferService', 'OfferController', 'OfferContainer', 'create_offer_container',
]
