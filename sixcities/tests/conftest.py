"""
Shared fixtures: a fresh SQLite database per test.
"""

import pytest
from fastapi.testclient import TestClient

from sixcities.api.app import create_app
from sixcities.offers.models import CreateOfferDto
from sixcities.offers.service import OfferService
from sixcities.storage.database import get_session, get_session_factory, init_database


@pytest.fixture
def database_url(tmp_path):
    """SQLite URL in the test's temporary directory."""
    return f"sqlite:///{tmp_path / 'offers.db'}"


@pytest.fixture
def engine(database_url):
    """Initialized engine with the cities seeded."""
    engine = init_database(database_url)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session(engine):
    """Get database session."""
    sess = get_session(engine)
    yield sess
    sess.close()


@pytest.fixture
def service(engine):
    return OfferService(get_session_factory(engine))


@pytest.fixture
def client(database_url):
    """FastAPI test client; entering it runs startup and creates the schema."""
    app = create_app(database_url)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def offer_data():
    """Valid creation body in the wire (camelCase) format."""
    return {
        "title": "Canal view apartment",
        "description": "Bright two-room flat a short walk from the central station.",
        "cityId": "amsterdam",
        "previewImage": "https://example.com/preview.jpg",
        "images": [f"https://example.com/{i}.jpg" for i in range(6)],
        "isPremium": True,
        "rating": 4.6,
        "type": "apartment",
        "bedrooms": 2,
        "maxAdults": 4,
        "price": 1200,
        "goods": ["Breakfast", "Washer"],
        "hostName": "Anna de Vries",
        "location": {"latitude": 52.3676, "longitude": 4.9041},
    }


@pytest.fixture
def make_offer(service, offer_data):
    """Create an offer through the service, overriding any wire fields."""
    def _make(**overrides):
        data = {**offer_data, **overrides}
        return service.create(CreateOfferDto.model_validate(data))
    return _make
