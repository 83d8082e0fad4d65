"""Projection of the city data store onto card view-models.

Cities with no snapshot get a placeholder card rather than being dropped,
so a failed city is always visible as unavailable.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from weatherboard.config.schema import CityConfig
from weatherboard.render.formatters import format_temp
from weatherboard.state.store import CityDataStore

UNAVAILABLE_CONDITION = "Data unavailable"
UNAVAILABLE_TEMPERATURE = "N/A"

TREND_ARROWS = {"rising": "↑", "falling": "↓", "stable": "→"}


@dataclass(frozen=True)
class CardView:
    city: str
    title: str
    temperature: str
    condition: str
    emoji: str = ""
    wind: str = ""
    humidity: str = ""
    trend: str = "stable"
    available: bool = True

    @property
    def trend_arrow(self) -> str:
        return TREND_ARROWS.get(self.trend, "")


def build_card(store: CityDataStore, city: CityConfig) -> CardView:
    snapshot = store.get_snapshot(city.slug)
    if snapshot is None:
        return CardView(
            city=city.slug,
            title=city.name,
            temperature=UNAVAILABLE_TEMPERATURE,
            condition=UNAVAILABLE_CONDITION,
            available=False,
        )
    return CardView(
        city=city.slug,
        title=snapshot.location,
        temperature=format_temp(snapshot.temperature),
        condition=snapshot.condition,
        emoji=snapshot.emoji,
        wind=f"💨 {snapshot.wind_speed:g} km/h",
        humidity=f"💧 {snapshot.humidity:g}%",
        trend=store.trend(city.slug),
    )


def build_cards(store: CityDataStore, cities: Iterable[CityConfig]) -> list[CardView]:
    """One card per city, in the order the cities are given."""
    return [build_card(store, city) for city in cities]
