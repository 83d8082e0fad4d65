"""Parsing of backend JSON payloads into models.

The weather endpoint has shipped in two shapes: fields nested under
``Current`` and fields at the top level. Both are accepted by looking for
the fields rather than assuming the nesting.
"""

import math

from weatherboard.ingest.errors import ParseError
from weatherboard.models.common import utc_now
from weatherboard.models.weather import Forecast, ForecastDay, WeatherSnapshot

_REQUIRED_WEATHER_FIELDS = ("Location", "Temperature", "Condition")
_REQUIRED_FORECAST_FIELDS = ("Date", "High", "Low")


def parse_weather(data: object) -> WeatherSnapshot:
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    current = data.get("Current")
    if isinstance(current, dict) and _has_fields(current, _REQUIRED_WEATHER_FIELDS):
        fields = current
    elif _has_fields(data, _REQUIRED_WEATHER_FIELDS):
        fields = data
    else:
        raise ParseError("Weather payload has no Location/Temperature/Condition")

    try:
        return WeatherSnapshot(
            location=str(fields["Location"]),
            temperature=_number(fields["Temperature"]),
            condition=str(fields["Condition"]),
            emoji=str(fields.get("Emoji") or ""),
            wind_speed=_number(fields.get("WindSpeed", 0)),
            humidity=_number(fields.get("Humidity", 0)),
            feels_like=_number(fields.get("FeelsLike", fields["Temperature"])),
            dramatic_message=fields.get("DramaticMessage") or None,
            uv_index=_optional_number(fields.get("UVIndex")),
            precip_chance=_optional_int(fields.get("PrecipChance")),
            fetched_at=utc_now(),
        )
    except (TypeError, ValueError) as e:
        raise ParseError(f"Bad weather field: {e}") from e


def parse_forecast(data: object) -> Forecast:
    if not isinstance(data, dict) or not isinstance(data.get("Forecast"), list):
        raise ParseError("Forecast payload has no Forecast list")

    days: list[ForecastDay] = []
    for i, entry in enumerate(data["Forecast"]):
        if not isinstance(entry, dict) or not _has_fields(entry, _REQUIRED_FORECAST_FIELDS):
            raise ParseError(f"Forecast entry {i} is missing Date/High/Low")
        try:
            days.append(
                ForecastDay(
                    date=str(entry["Date"]),
                    emoji=str(entry.get("Emoji") or ""),
                    high=_number(entry["High"]),
                    low=_number(entry["Low"]),
                    condition=str(entry.get("Condition") or ""),
                )
            )
        except (TypeError, ValueError) as e:
            raise ParseError(f"Bad forecast entry {i}: {e}") from e
    return tuple(days)


def _has_fields(obj: dict, names: tuple[str, ...]) -> bool:
    return all(name in obj for name in names)


def _number(value: object) -> float:
    if isinstance(value, bool):
        raise TypeError("boolean is not a number")
    try:
        n = float(value)  # type: ignore[arg-type]
    except OverflowError as e:
        raise ValueError("number out of range") from e
    if not math.isfinite(n):
        raise ValueError(f"number is not finite: {value!r}")
    return int(n) if n.is_integer() else n


def _optional_number(value: object) -> float | None:
    return None if value is None else _number(value)


def _optional_int(value: object) -> int | None:
    return None if value is None else int(_number(value))
