"""
Mock offer generators for Six Cities.
Generate valid creation payloads for development databases and tests.
"""

import random
from typing import List, Optional
from faker import Faker

from sixcities.storage.schema import CITIES
from sixcities.offers.models import CreateOfferDto, Good, OfferType, OFFER_IMAGE_COUNT


# Max distance (degrees) of an offer from its city centre
LOCATION_JITTER = 0.05


class MockOfferGenerator:
    """Generate offer creation payloads with Faker."""

    def __init__(self, seed: int = 42):
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self.random = random.Random(seed)

    def _image(self) -> str:
        return f"https://picsum.photos/seed/{self.fake.uuid4()[:8]}/520/340"

    def generate_offer(self, city_id: Optional[str] = None) -> CreateOfferDto:
        """
        Generate a single offer payload.

        Args:
            city_id: City to place the offer in (random if None)

        Returns:
            CreateOfferDto that passes request validation
        """
        if city_id is None:
            city = self.random.choice(CITIES)
        else:
            city = next(c for c in CITIES if c[0] == city_id)
        city_id, city_name, latitude, longitude = city

        title = self.fake.sentence(nb_words=4).rstrip(".")
        if len(title) < 10:
            title = f"{title} in {city_name}"

        description = self.fake.paragraph(nb_sentences=3)
        while len(description) < 20:
            description = f"{description} {self.fake.sentence()}"

        goods = self.random.sample(list(Good), k=self.random.randint(1, len(Good)))

        return CreateOfferDto(
            title=title[:100],
            description=description[:1024],
            city_id=city_id,
            preview_image=self._image(),
            images=[self._image() for _ in range(OFFER_IMAGE_COUNT)],
            is_premium=self.random.random() < 0.3,
            is_favorite=False,
            rating=round(self.random.uniform(1, 5), 1),
            type=self.random.choice(list(OfferType)),
            bedrooms=self.random.randint(1, 8),
            max_adults=self.random.randint(1, 10),
            price=self.random.randint(100, 100000),
            goods=goods,
            host_name=self.fake.name(),
            location={
                "latitude": round(latitude + self.random.uniform(-LOCATION_JITTER, LOCATION_JITTER), 6),
                "longitude": round(longitude + self.random.uniform(-LOCATION_JITTER, LOCATION_JITTER), 6),
            },
        )

    def generate_offers(self, count: int) -> List[CreateOfferDto]:
        return [self.generate_offer() for _ in range(count)]
