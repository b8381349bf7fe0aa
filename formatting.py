"""
Plain-text rendering of a QueryState, used by the Telegram bot.
"""

from abilities.weather_codes import classify, describe
from models import ErrorKind, Failure, Loading, QueryState, Success

IDLE_PROMPT = "Enter a city name to see the weather."


def error_message(kind: ErrorKind, query: str = "") -> str:
    if kind is ErrorKind.EMPTY_INPUT:
        return "Please enter a city name."
    if kind is ErrorKind.NOT_FOUND:
        return f'City "{query}" not found.'
    return "Failed to fetch weather data."


def format_report(state: Success) -> str:
    cur = state.current
    hour = cur.observed_at.hour if cur.observed_at else None
    look = classify(cur.weather_code, hour)

    lines = [
        f"{look.icon} Weather for {state.location.label}",
        f"{cur.temperature_c:.0f}°C, {look.description}",
        "",
        f"Feels like: {cur.feels_like_c:.0f}°C",
        f"Humidity: {cur.humidity_pct}%",
        f"Wind: {cur.wind_kmh:.0f} km/h",
        f"Pressure: {cur.pressure_hpa:.0f} hPa",
        f"Visibility: {cur.visibility_km:g} km",
    ]
    if state.daily:
        lines += ["", f"Next {len(state.daily)} days:"]
        for day in state.daily:
            icon, description = describe(day.weather_code)
            lines.append(
                f"  {day.date:%a %d %b}  {icon} {day.temp_max_c:.0f}° / {day.temp_min_c:.0f}°  {description}"
            )
    return "\n".join(lines)


def format_state(state: QueryState) -> str:
    """Text for whatever the current state is."""
    if isinstance(state, Success):
        return format_report(state)
    if isinstance(state, Failure):
        return error_message(state.kind, state.query)
    if isinstance(state, Loading):
        return f"Looking up {state.query}..."
    return IDLE_PROMPT
