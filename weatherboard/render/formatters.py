"""Plain-text formatting for loader results and the terminal board."""

from weatherboard.models.weather import Forecast, WeatherSnapshot

WEATHER_ERROR_MESSAGE = "Could not load the weather right now. Please try again later."
FORECAST_ERROR_MESSAGE = "Could not load the forecast right now. Please try again later."


def format_temp(value: float) -> str:
    return f"{value:g}°C"


def format_weather_message(s: WeatherSnapshot) -> str:
    lines = [
        s.location,
        f"Temperature: {format_temp(s.temperature)}",
        f"Condition: {s.condition}",
        f"Feels like: {format_temp(s.feels_like)}",
    ]
    if s.dramatic_message:
        lines.extend(["", s.dramatic_message])
    return "\n".join(lines)


def format_forecast_line(day) -> str:
    line = f"{day.date}: {day.emoji} {format_temp(day.high)}/{format_temp(day.low)}"
    if day.condition:
        line += f" - {day.condition}"
    return line


def format_forecast_message(city: str, forecast: Forecast) -> str:
    header = f"5-day forecast for {city[:1].upper()}{city[1:]}:"
    return "\n".join([header, "", *(format_forecast_line(d) for d in forecast)])


def format_board_text(cards, status_line: str) -> str:
    """Terminal rendering of the card list, one line per card."""
    lines = [status_line]
    for c in cards:
        detail = f"  {c.wind}  {c.humidity}" if c.available else ""
        lines.append(
            f"{c.emoji or '?'} {c.title:<14} {c.temperature:>7} "
            f"{c.trend_arrow} {c.condition}{detail}"
        )
    return "\n".join(lines)
