"""
WMO weather code lookup — icon, label and background gradient.

Pure functions over immutable tables; no I/O.
"""

from bisect import bisect_right
from datetime import datetime
from types import MappingProxyType
from typing import Optional

from models import Classification, GradientKey, Severity, TimeOfDay

FALLBACK = ("❓", "Unknown")

WEATHER_CODES = MappingProxyType({
    0: ("☀️", "Clear sky"),
    1: ("🌤️", "Mainly clear"),
    2: ("⛅", "Partly cloudy"),
    3: ("☁️", "Overcast"),
    45: ("🌫️", "Fog"),
    48: ("🌫️", "Depositing rime fog"),
    51: ("🌦️", "Light drizzle"),
    53: ("🌦️", "Moderate drizzle"),
    55: ("🌦️", "Dense drizzle"),
    56: ("🌧️", "Light freezing drizzle"),
    57: ("🌧️", "Dense freezing drizzle"),
    61: ("🌧️", "Slight rain"),
    63: ("🌧️", "Moderate rain"),
    65: ("🌧️", "Heavy rain"),
    66: ("🌧️", "Light freezing rain"),
    67: ("🌧️", "Heavy freezing rain"),
    71: ("🌨️", "Slight snow fall"),
    73: ("🌨️", "Moderate snow fall"),
    75: ("❄️", "Heavy snow fall"),
    77: ("🌨️", "Snow grains"),
    80: ("🌦️", "Slight rain showers"),
    81: ("🌦️", "Moderate rain showers"),
    82: ("⛈️", "Violent rain showers"),
    85: ("🌨️", "Slight snow showers"),
    86: ("❄️", "Heavy snow showers"),
    95: ("⛈️", "Thunderstorm"),
    96: ("⛈️", "Thunderstorm with slight hail"),
    99: ("⛈️", "Thunderstorm with heavy hail"),
})

# Lower bound of each severity bucket, ascending. The first bucket is
# open below, the last open above, so every integer lands in exactly one.
_BUCKET_BOUNDS = (2, 49, 68, 80, 95)
_BUCKETS = (
    Severity.CLEAR,
    Severity.CLOUDY,
    Severity.RAIN,
    Severity.SNOW,
    Severity.SHOWERS,
    Severity.STORM,
)

DAY_START_HOUR = 6
NIGHT_START_HOUR = 18

GRADIENTS = MappingProxyType({
    GradientKey(TimeOfDay.DAY, Severity.CLEAR): ("#38bdf8", "#2563eb"),
    GradientKey(TimeOfDay.DAY, Severity.CLOUDY): ("#94a3b8", "#475569"),
    GradientKey(TimeOfDay.DAY, Severity.RAIN): ("#60a5fa", "#334155"),
    GradientKey(TimeOfDay.DAY, Severity.SNOW): ("#e0f2fe", "#93c5fd"),
    GradientKey(TimeOfDay.DAY, Severity.SHOWERS): ("#7dd3fc", "#3f6212"),
    GradientKey(TimeOfDay.DAY, Severity.STORM): ("#64748b", "#1e1b4b"),
    GradientKey(TimeOfDay.NIGHT, Severity.CLEAR): ("#1e3a8a", "#0f172a"),
    GradientKey(TimeOfDay.NIGHT, Severity.CLOUDY): ("#334155", "#0f172a"),
    GradientKey(TimeOfDay.NIGHT, Severity.RAIN): ("#1e293b", "#020617"),
    GradientKey(TimeOfDay.NIGHT, Severity.SNOW): ("#475569", "#1e293b"),
    GradientKey(TimeOfDay.NIGHT, Severity.SHOWERS): ("#1e3a5f", "#020617"),
    GradientKey(TimeOfDay.NIGHT, Severity.STORM): ("#312e81", "#000000"),
})


def describe(code: int) -> tuple[str, str]:
    """(icon, description) for a code, or the fallback pair."""
    return WEATHER_CODES.get(code, FALLBACK)


def time_of_day(hour: int) -> TimeOfDay:
    if DAY_START_HOUR <= hour < NIGHT_START_HOUR:
        return TimeOfDay.DAY
    return TimeOfDay.NIGHT


def severity(code: int) -> Severity:
    return _BUCKETS[bisect_right(_BUCKET_BOUNDS, code)]


def classify(code: int, hour: Optional[int] = None) -> Classification:
    """Map a weather code (and local hour, default now) to its display."""
    if hour is None:
        hour = datetime.now().hour
    period = time_of_day(hour)
    icon, description = describe(code)
    return Classification(
        icon=icon,
        description=description,
        gradient=GradientKey(period, severity(code)),
    )


def gradient_css(key: GradientKey) -> str:
    start, end = GRADIENTS[key]
    return f"linear-gradient(135deg, {start}, {end})"
