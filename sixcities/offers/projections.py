"""
Response projections for offers.

Each function maps a stored offer onto one public shape and drops
internal-only columns such as ``created_at`` and ``updated_at``.
"""

from typing import Iterable, List

from sixcities.storage.schema import City, Offer
from sixcities.offers.models import CityRdo, Location, OfferPreviewRdo, OfferRdo


def to_city(city: City) -> CityRdo:
    return CityRdo(
        id=city.city_id,
        name=city.name,
        location=Location(latitude=city.latitude, longitude=city.longitude),
    )


def to_preview(offer: Offer) -> OfferPreviewRdo:
    """Project an offer onto the list-view shape."""
    return OfferPreviewRdo(
        id=offer.offer_id,
        title=offer.title,
        type=offer.type,
        price=offer.price,
        city=to_city(offer.city),
        is_favorite=offer.is_favorite,
        is_premium=offer.is_premium,
        rating=offer.rating,
        preview_image=offer.preview_image,
        post_date=offer.post_date,
        comment_count=offer.comment_count,
    )


def to_full(offer: Offer) -> OfferRdo:
    """Project an offer onto the detail-view shape."""
    preview = to_preview(offer)
    return OfferRdo(
        **preview.model_dump(),
        description=offer.description,
        images=list(offer.images),
        bedrooms=offer.bedrooms,
        max_adults=offer.max_adults,
        goods=list(offer.goods),
        host_name=offer.host_name,
        location=Location(latitude=offer.latitude, longitude=offer.longitude),
    )


def to_previews(offers: Iterable[Offer]) -> List[OfferPreviewRdo]:
    return [to_preview(offer) for offer in offers]
