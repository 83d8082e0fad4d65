"""Tests for dashboard HTML rendering and text formatters."""

from weatherboard.config.defaults import DEFAULT_CITIES
from weatherboard.render.cards import build_cards
from weatherboard.render.formatters import format_board_text, format_forecast_line, format_temp
from weatherboard.render.html import render_card_html, render_page
from weatherboard.state.store import CityDataStore
from weatherboard.models.weather import ForecastDay
from weatherboard.tests.helpers import make_snapshot

ENABLED = [c for c in DEFAULT_CITIES if c.enabled]


class TestHtml:
    def test_cards_keyed_by_city(self):
        html = render_page(build_cards(CityDataStore(), ENABLED), "Loading...")
        for city in ("zagreb", "split", "dubrovnik", "rijeka", "zadar"):
            assert html.count(f'data-city="{city}"') == 1
        assert '<p id="refreshStatus">Loading...</p>' in html

    def test_forecast_button_stops_propagation(self):
        card = build_cards(CityDataStore(), ENABLED[:1])[0]
        html = render_card_html(card)
        assert "event.stopPropagation(); press('zagreb', 'forecast')" in html
        assert "unavailable" in html

    def test_escapes_text(self):
        store = CityDataStore()
        store.record_snapshot("zagreb", make_snapshot("<b>Zagreb</b>", 3))
        html = render_card_html(build_cards(store, ENABLED[:1])[0])
        assert "&lt;b&gt;Zagreb&lt;/b&gt;" in html


class TestFormatters:
    def test_format_temp(self):
        assert format_temp(3) == "3°C"
        assert format_temp(3.0) == "3°C"
        assert format_temp(-2.5) == "-2.5°C"

    def test_forecast_line_without_condition(self):
        day = ForecastDay(date="Monday", emoji="❄️", high=1, low=-3)
        assert format_forecast_line(day) == "Monday: ❄️ 1°C/-3°C"

    def test_board_text(self):
        store = CityDataStore()
        store.record_snapshot("zagreb", make_snapshot("Zagreb", 3))
        text = format_board_text(build_cards(store, ENABLED), "Last refreshed: just now")
        lines = text.splitlines()
        assert lines[0] == "Last refreshed: just now"
        assert len(lines) == 6
        assert "N/A" in lines[2]
        assert "Data unavailable" in lines[2]
