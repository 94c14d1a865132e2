"""
Seed the offers database with mock data.

Usage:
    python -m sixcities.ingest.seed --count 20 [--reset]
"""

import logging

from sixcities.config.logging_config import setup_logging
from sixcities.ingest.generators import MockOfferGenerator
from sixcities.offers.service import OfferService
from sixcities.storage.database import get_session_factory, init_database


logger = logging.getLogger("sixcities.ingest")


def seed_offers(service: OfferService, count: int, seed: int = 42) -> int:
    """
    Create mock offers through the service.

    Returns:
        Number of offers created
    """
    generator = MockOfferGenerator(seed=seed)
    for payload in generator.generate_offers(count):
        service.create(payload)

    logger.info("Seeded %d offers", count)
    return count


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(
        description="Fill the offers database with mock offers"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=20,
        help="Number of offers to create (default: 20)"
    )
    parser.add_argument(
        "--database-url",
        type=str,
        help="SQLAlchemy URL (default: DATABASE_URL setting)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for the generator"
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing tables first"
    )

    args = parser.parse_args(argv)

    setup_logging()
    engine = init_database(args.database_url, drop_existing=args.reset)
    created = seed_offers(OfferService(get_session_factory(engine)), args.count, seed=args.seed)

    print(f"✓ Created {created} offers")
    return created


if __name__ == "__main__":
    main()
