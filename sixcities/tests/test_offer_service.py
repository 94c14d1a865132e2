"""
Tests for the Offer Service

Covers CRUD behaviour against a real SQLite store.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from sixcities.offers.models import CreateOfferDto, UpdateOfferDto
from sixcities.offers.projections import to_full
from sixcities.storage.schema import Offer


class TestCreate:
    """Tests for OfferService.create."""

    def test_create_assigns_id(self, make_offer):
        """Test that the store assigns an identifier."""
        offer = make_offer()

        assert offer.offer_id
        assert offer.city.name == "Amsterdam"
        assert offer.comment_count == 0
        assert offer.is_favorite is False

    def test_create_then_find_matches(self, service, make_offer):
        """Test create followed by find_by_id yields the same full shape."""
        created = make_offer()

        found = service.find_by_id(created.offer_id)

        assert found is not None
        assert to_full(found) == to_full(created)

    def test_create_stores_location_columns(self, session, make_offer):
        """Test the nested location is flattened onto the row."""
        offer = make_offer()

        row = session.get(Offer, offer.offer_id)

        assert row.latitude == pytest.approx(52.3676)
        assert row.longitude == pytest.approx(4.9041)
        assert row.goods == ["Breakfast", "Washer"]
        assert row.type == "apartment"

    def test_create_unknown_city_propagates(self, service, offer_data):
        """Test a store rejection is raised, not swallowed."""
        payload = CreateOfferDto.model_validate({**offer_data, "cityId": "atlantis"})

        with pytest.raises(IntegrityError):
            service.create(payload)

        assert service.find_all() == []


class TestFind:
    """Tests for the read operations."""

    def test_find_by_id_missing_returns_none(self, service):
        """Test that an unknown id is reported as absent."""
        assert service.find_by_id("missing") is None
        assert service.exists("missing") is False

    def test_find_all_counts_offers(self, service, make_offer):
        """Test find_all returns every offer."""
        assert service.find_all() == []

        ids = {make_offer().offer_id for _ in range(3)}

        offers = service.find_all()
        assert len(offers) == 3
        assert {offer.offer_id for offer in offers} == ids

    def test_find_all_newest_first(self, service, make_offer, session):
        """Test offers are ordered by post date descending."""
        older = make_offer(title="Older listing here")
        newer = make_offer(title="Newer listing here")

        row = session.get(Offer, older.offer_id)
        row.post_date = row.post_date.replace(year=2020)
        session.commit()

        offers = service.find_all()
        assert [offer.offer_id for offer in offers] == [newer.offer_id, older.offer_id]

    def test_find_premium_offers_filters_city_and_flag(self, service, make_offer):
        """Test only premium offers of the requested city are returned."""
        premium_here = make_offer(cityId="paris", isPremium=True)
        make_offer(cityId="paris", isPremium=False)
        make_offer(cityId="hamburg", isPremium=True)

        offers = service.find_premium_offers("paris")

        assert [offer.offer_id for offer in offers] == [premium_here.offer_id]

    def test_find_premium_offers_unknown_city(self, service, make_offer):
        """Test an unknown city yields an empty list."""
        make_offer(isPremium=True)

        assert service.find_premium_offers("atlantis") == []


class TestUpdate:
    """Tests for OfferService.update_by_id."""

    def test_partial_update_only_changes_sent_fields(self, service, make_offer):
        """Test that unsent fields keep their values."""
        offer = make_offer()

        updated = service.update_by_id(offer.offer_id, UpdateOfferDto(price=950))

        assert updated.offer_id == offer.offer_id
        assert updated.price == 950
        assert updated.title == offer.title
        assert updated.goods == offer.goods

    def test_update_city_reloads_relationship(self, service, make_offer):
        """Test moving an offer to another city updates the embedded city."""
        offer = make_offer()

        updated = service.update_by_id(offer.offer_id, UpdateOfferDto(city_id="brussels"))

        assert updated.city_id == "brussels"
        assert updated.city.name == "Brussels"

    def test_update_location(self, service, make_offer):
        """Test nested location updates both coordinates."""
        offer = make_offer()

        updated = service.update_by_id(
            offer.offer_id,
            UpdateOfferDto.model_validate({"location": {"latitude": 10.5, "longitude": 20.25}})
        )

        assert updated.latitude == 10.5
        assert updated.longitude == 20.25

    def test_update_missing_returns_none(self, service):
        """Test updating an unknown id reports absence."""
        assert service.update_by_id("missing", UpdateOfferDto(price=500)) is None


class TestDelete:
    """Tests for OfferService.delete_by_id."""

    def test_delete_then_find_is_absent(self, service, make_offer):
        """Test a deleted offer can no longer be found."""
        offer = make_offer()

        deleted = service.delete_by_id(offer.offer_id)

        assert deleted.offer_id == offer.offer_id
        assert service.find_by_id(offer.offer_id) is None
        assert service.find_all() == []

    def test_delete_missing_is_noop(self, service, make_offer):
        """Test deleting an unknown id does not raise or touch other offers."""
        make_offer()

        assert service.delete_by_id("missing") is None
        assert len(service.find_all()) == 1
