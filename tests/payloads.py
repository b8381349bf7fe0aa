"""Canned Open-Meteo responses."""

GEOCODE_LONDON = {
    "results": [
        {
            "id": 2643743,
            "name": "London",
            "latitude": 51.50853,
            "longitude": -0.12574,
            "country_code": "GB",
            "country": "United Kingdom",
            "admin1": "England",
            "timezone": "Europe/London",
        }
    ],
    "generationtime_ms": 0.61,
}

# Open-Meteo leaves out "results" entirely when nothing matches
GEOCODE_EMPTY = {"generationtime_ms": 0.42}

FORECAST_LONDON = {
    "latitude": 51.5,
    "longitude": -0.120000124,
    "timezone": "Europe/London",
    "current": {
        "time": "2026-10-19T14:00",
        "interval": 900,
        "temperature_2m": 13.4,
        "apparent_temperature": 11.9,
        "relative_humidity_2m": 78,
        "wind_speed_10m": 17.3,
        "surface_pressure": 1008.2,
        "visibility": 24140.0,
        "weather_code": 3,
    },
    "daily": {
        "time": [
            "2026-10-19", "2026-10-20", "2026-10-21", "2026-10-22",
            "2026-10-23", "2026-10-24", "2026-10-25",
        ],
        "weather_code": [3, 61, 80, 2, 0, 95, 45],
        "temperature_2m_max": [14.1, 13.0, 12.7, 15.2, 16.0, 12.9, 11.8],
        "temperature_2m_min": [8.3, 9.1, 7.5, 6.9, 8.8, 9.4, 6.0],
    },
}
