"""
Data models for locations, weather readings and query state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union


class ErrorKind(Enum):
    EMPTY_INPUT = "empty_input"
    NOT_FOUND = "not_found"
    NETWORK_ERROR = "network_error"


class TimeOfDay(Enum):
    DAY = "day"
    NIGHT = "night"


class Severity(Enum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    SHOWERS = "showers"
    STORM = "storm"


# ── Weather data ────────────────────────────────────────────────

@dataclass(frozen=True)
class Location:
    name: str
    country: str
    latitude: float
    longitude: float
    region: Optional[str] = None

    @property
    def label(self) -> str:
        parts = [self.name]
        for part in (self.region, self.country):
            if part and part not in parts:
                parts.append(part)
        return ", ".join(parts)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "country": self.country,
            "region": self.region,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class CurrentConditions:
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_kmh: float
    pressure_hpa: float
    visibility_km: float
    weather_code: int
    observed_at: Optional[datetime] = None  # local time at the location

    def to_dict(self) -> dict:
        return {
            "temperature_c": self.temperature_c,
            "feels_like_c": self.feels_like_c,
            "humidity_pct": self.humidity_pct,
            "wind_kmh": self.wind_kmh,
            "pressure_hpa": self.pressure_hpa,
            "visibility_km": self.visibility_km,
            "weather_code": self.weather_code,
            "observed_at": self.observed_at.isoformat() if self.observed_at else None,
        }


@dataclass(frozen=True)
class DailyForecastEntry:
    date: date
    weather_code: int
    temp_max_c: float
    temp_min_c: float

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "weather_code": self.weather_code,
            "temp_max_c": self.temp_max_c,
            "temp_min_c": self.temp_min_c,
        }


# Chronological, at most FORECAST_DAYS entries
DailyForecast = tuple[DailyForecastEntry, ...]


@dataclass(frozen=True)
class GradientKey:
    time_of_day: TimeOfDay
    severity: Severity

    @property
    def css_class(self) -> str:
        return f"{self.time_of_day.value}-{self.severity.value}"


@dataclass(frozen=True)
class Classification:
    icon: str
    description: str
    gradient: GradientKey


# ── Query state ─────────────────────────────────────────────────
# Exactly one of these is current at any time; the orchestrator
# replaces it wholesale on every transition.

@dataclass(frozen=True)
class Idle:
    status: str = field(default="idle", init=False)

    def to_dict(self) -> dict:
        return {"status": self.status}


@dataclass(frozen=True)
class Loading:
    query: str
    status: str = field(default="loading", init=False)

    def to_dict(self) -> dict:
        return {"status": self.status, "query": self.query}


@dataclass(frozen=True)
class Success:
    query: str
    location: Location
    current: CurrentConditions
    daily: DailyForecast
    status: str = field(default="success", init=False)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "query": self.query,
            "location": self.location.to_dict(),
            "current": self.current.to_dict(),
            "daily": [d.to_dict() for d in self.daily],
        }


@dataclass(frozen=True)
class Failure:
    query: str
    kind: ErrorKind
    status: str = field(default="failure", init=False)

    def to_dict(self) -> dict:
        return {"status": self.status, "query": self.query, "error": self.kind.value}


QueryState = Union[Idle, Loading, Success, Failure]
