"""Default city set shown on the board."""

from weatherboard.config.schema import CityConfig

DEFAULT_CITIES: list[CityConfig] = [
    CityConfig(slug="zagreb", name="Zagreb"),
    CityConfig(slug="split", name="Split"),
    CityConfig(slug="dubrovnik", name="Dubrovnik"),
    CityConfig(slug="rijeka", name="Rijeka"),
    CityConfig(slug="zadar", name="Zadar"),
    CityConfig(slug="osijek", name="Osijek", enabled=False),
]
