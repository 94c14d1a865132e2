"""
Tests for offer module composition.
"""

from sixcities.offers.container import create_offer_container
from sixcities.offers.controller import OfferController
from sixcities.offers.service import OfferService
from sixcities.storage.database import get_session_factory


class TestOfferContainer:
    """Tests for create_offer_container."""

    def test_wires_single_instances(self, engine):
        """Test the controller uses the same service and storage handle."""
        session_factory = get_session_factory(engine)

        container = create_offer_container(session_factory)

        assert isinstance(container.offer_service, OfferService)
        assert isinstance(container.offer_controller, OfferController)
        assert container.offer_controller.offer_service is container.offer_service
        assert container.offer_service.session_factory is session_factory

    def test_routes_registered_in_order(self, engine):
        """Test /premium is matched before the offer id route."""
        container = create_offer_container(get_session_factory(engine))

        routes = [
            (next(iter(route.methods)), route.path)
            for route in container.offer_controller.router.routes
        ]

        assert routes == [
            ("GET", ""),
            ("POST", ""),
            ("GET", "/premium"),
            ("GET", "/{offerId}"),
            ("PATCH", "/{offerId}"),
            ("DELETE", "/{offerId}"),
        ]
