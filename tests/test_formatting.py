from __future__ import annotations

from formatting import IDLE_PROMPT, error_message, format_state
from models import ErrorKind, Failure, Idle, Loading, Success


def test_success_report(london, current, daily):
    text = format_state(Success(query="london", location=london, current=current, daily=daily))

    lines = text.splitlines()
    assert lines[0] == "☁️ Weather for London, England, United Kingdom"
    assert lines[1] == "13°C, Overcast"
    assert "Feels like: 12°C" in text
    assert "Humidity: 78%" in text
    assert "Wind: 17 km/h" in text
    assert "Pressure: 1008 hPa" in text
    assert "Visibility: 24.1 km" in text
    assert "Next 2 days:" in text
    assert "Mon 19 Oct" in text
    assert "Slight rain" in text
    assert "14° / 8°" in text


def test_error_messages():
    assert error_message(ErrorKind.EMPTY_INPUT) == "Please enter a city name."
    assert error_message(ErrorKind.NOT_FOUND, "Zzqxnotacity") == 'City "Zzqxnotacity" not found.'
    assert error_message(ErrorKind.NETWORK_ERROR) == "Failed to fetch weather data."


def test_other_states():
    assert format_state(Idle()) == IDLE_PROMPT
    assert format_state(Loading(query="Oslo")) == "Looking up Oslo..."
    assert format_state(Failure(query="Oslo", kind=ErrorKind.NETWORK_ERROR)) == "Failed to fetch weather data."
