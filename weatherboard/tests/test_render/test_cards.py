"""Tests for the card view-model projection."""

from weatherboard.config.defaults import DEFAULT_CITIES
from weatherboard.render.cards import (
    UNAVAILABLE_CONDITION,
    UNAVAILABLE_TEMPERATURE,
    build_cards,
)
from weatherboard.state.store import CityDataStore
from weatherboard.tests.helpers import make_snapshot

ENABLED = [c for c in DEFAULT_CITIES if c.enabled]


class TestBuildCards:
    def test_one_card_per_city_in_order(self):
        cards = build_cards(CityDataStore(), ENABLED)
        assert [c.city for c in cards] == ["zagreb", "split", "dubrovnik", "rijeka", "zadar"]

    def test_missing_snapshot_is_placeholder(self):
        cards = build_cards(CityDataStore(), ENABLED[:1])
        card = cards[0]
        assert not card.available
        assert card.title == "Zagreb"
        assert card.temperature == UNAVAILABLE_TEMPERATURE == "N/A"
        assert card.condition == UNAVAILABLE_CONDITION == "Data unavailable"

    def test_live_card_fields(self):
        store = CityDataStore()
        store.record_snapshot("zagreb", make_snapshot("Zagreb 🏛️", 3, wind_speed=12, humidity=75))
        card = build_cards(store, ENABLED[:1])[0]
        assert card.available
        assert card.title == "Zagreb 🏛️"
        assert card.temperature == "3°C"
        assert card.condition == "Cloudy"
        assert card.wind == "💨 12 km/h"
        assert card.humidity == "💧 75%"

    def test_trend_arrow(self):
        store = CityDataStore()
        store.record_snapshot("zagreb", make_snapshot(temperature=3))
        store.record_snapshot("zagreb", make_snapshot(temperature=6))
        card = build_cards(store, ENABLED[:1])[0]
        assert card.trend == "rising"
        assert card.trend_arrow == "↑"

    def test_pure(self):
        store = CityDataStore()
        store.record_snapshot("split", make_snapshot("Split", 11))
        assert build_cards(store, ENABLED) == build_cards(store, ENABLED)
