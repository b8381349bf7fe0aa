from __future__ import annotations

from datetime import date, datetime

import pytest
from requests_mock import Mocker

from models import CurrentConditions, DailyForecastEntry, Location


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def london() -> Location:
    return Location(
        name="London",
        country="United Kingdom",
        region="England",
        latitude=51.50853,
        longitude=-0.12574,
    )


@pytest.fixture
def current() -> CurrentConditions:
    return CurrentConditions(
        temperature_c=13.4,
        feels_like_c=11.9,
        humidity_pct=78,
        wind_kmh=17.3,
        pressure_hpa=1008.2,
        visibility_km=24.1,
        weather_code=3,
        observed_at=datetime(2026, 10, 19, 14, 0),
    )


@pytest.fixture
def daily() -> tuple[DailyForecastEntry, ...]:
    return (
        DailyForecastEntry(date(2026, 10, 19), 3, 14.1, 8.3),
        DailyForecastEntry(date(2026, 10, 20), 61, 13.0, 9.1),
    )
