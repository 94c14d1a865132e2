"""
Database schema definitions for Six Cities.
"""

from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Float, Boolean, DateTime,
    ForeignKey, Text, JSON, Index
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class City(Base):
    """City table - the fixed set of cities offers are listed in."""
    __tablename__ = 'cities'

    city_id = Column(String, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    # Relationships
    offers = relationship("Offer", back_populates="city")


class Offer(Base):
    """Offer table - rental listings."""
    __tablename__ = 'offers'

    offer_id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    post_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    city_id = Column(String, ForeignKey('cities.city_id'), nullable=False)
    preview_image = Column(String, nullable=False)
    images = Column(JSON, nullable=False)  # list of 6 image URLs
    is_premium = Column(Boolean, default=False, nullable=False)
    is_favorite = Column(Boolean, default=False, nullable=False)
    rating = Column(Float, nullable=False)  # 1-5
    type = Column(String, nullable=False)  # apartment, house, room, hotel
    bedrooms = Column(Integer, nullable=False)
    max_adults = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    goods = Column(JSON, nullable=False)
    host_name = Column(String, nullable=False)
    comment_count = Column(Integer, default=0, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    city = relationship("City", back_populates="offers", lazy="joined")

    __table_args__ = (
        Index('idx_offers_city', 'city_id'),
        Index('idx_offers_premium', 'is_premium'),
        Index('idx_offers_post_date', 'post_date'),
    )


# Seed rows for the cities table: (city_id, name, latitude, longitude)
CITIES = [
    ("paris", "Paris", 48.85661, 2.351499),
    ("cologne", "Cologne", 50.938361, 6.959974),
    ("brussels", "Brussels", 50.846557, 4.351697),
    ("amsterdam", "Amsterdam", 52.370216, 4.895168),
    ("hamburg", "Hamburg", 53.550341, 10.000654),
    ("dusseldorf", "Dusseldorf", 51.225402, 6.776314),
]
