"""
Weather ability — free, no API key required.

Uses the Open-Meteo forecast API: current conditions plus a daily
summary for the next FORECAST_DAYS days, in metric units.
"""

import logging
from datetime import date, datetime
from typing import Optional

import requests

from abilities.errors import NetworkError
from abilities.transport import get_json
from config import FORECAST_DAYS, FORECAST_URL
from models import CurrentConditions, DailyForecast, DailyForecastEntry

log = logging.getLogger(__name__)

CURRENT_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "surface_pressure",
    "visibility",
    "weather_code",
)
DAILY_FIELDS = ("weather_code", "temperature_2m_max", "temperature_2m_min")


def fetch_weather(
    latitude: float,
    longitude: float,
    session: Optional[requests.Session] = None,
) -> tuple[CurrentConditions, DailyForecast]:
    """Get current conditions and the daily forecast for a coordinate pair."""
    data = get_json(
        FORECAST_URL,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "forecast_days": FORECAST_DAYS,
            "timezone": "auto",
            "temperature_unit": "celsius",
            "wind_speed_unit": "kmh",
        },
        session=session,
    )

    try:
        current = _parse_current(data["current"])
        daily = _parse_daily(data["daily"])
    except (KeyError, TypeError, ValueError) as exc:
        log.error(f"Malformed forecast payload for ({latitude}, {longitude}): {exc!r}")
        raise NetworkError("malformed forecast payload") from exc

    log.info(f"Fetched weather for ({latitude}, {longitude}): code {current.weather_code}, {len(daily)} days")
    return current, daily


def _parse_current(cw: dict) -> CurrentConditions:
    return CurrentConditions(
        temperature_c=float(cw["temperature_2m"]),
        feels_like_c=float(cw["apparent_temperature"]),
        humidity_pct=int(cw["relative_humidity_2m"]),
        wind_kmh=float(cw["wind_speed_10m"]),
        pressure_hpa=float(cw["surface_pressure"]),
        visibility_km=round(float(cw["visibility"]) / 1000, 1),  # API reports metres
        weather_code=int(cw["weather_code"]),
        observed_at=_parse_time(cw.get("time")),
    )


def _parse_daily(daily: dict) -> DailyForecast:
    dates = daily["time"]
    codes = daily["weather_code"]
    highs = daily["temperature_2m_max"]
    lows = daily["temperature_2m_min"]
    if not (len(dates) == len(codes) == len(highs) == len(lows)):
        raise ValueError("daily series have different lengths")

    return tuple(
        DailyForecastEntry(
            date=date.fromisoformat(day),
            weather_code=int(code),
            temp_max_c=float(high),
            temp_min_c=float(low),
        )
        for day, code, high, low in list(zip(dates, codes, highs, lows))[:FORECAST_DAYS]
    )


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)
