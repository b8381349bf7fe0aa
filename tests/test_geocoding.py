from __future__ import annotations

import pytest
import requests

from abilities.errors import EmptyInputError, NetworkError, NotFoundError
from abilities.geocoding import resolve
from config import GEOCODING_URL
from models import ErrorKind
from payloads import GEOCODE_EMPTY, GEOCODE_LONDON


def test_resolve_returns_top_match(requests_mock):
    requests_mock.get(GEOCODING_URL, json=GEOCODE_LONDON)

    location = resolve("  London ")

    assert location.name == "London"
    assert location.country == "United Kingdom"
    assert location.region == "England"
    assert location.latitude == pytest.approx(51.50853)
    assert location.longitude == pytest.approx(-0.12574)
    assert location.label == "London, England, United Kingdom"

    assert requests_mock.call_count == 1
    qs = requests_mock.last_request.qs
    assert qs["name"] == ["london"]
    assert qs["count"] == ["1"]
    assert qs["language"] == ["en"]


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_blank_name_never_hits_network(requests_mock, name):
    with pytest.raises(EmptyInputError) as info:
        resolve(name)

    assert info.value.kind is ErrorKind.EMPTY_INPUT
    assert requests_mock.call_count == 0


@pytest.mark.parametrize("payload", [GEOCODE_EMPTY, {"results": []}])
def test_no_results_is_not_found(requests_mock, payload):
    requests_mock.get(GEOCODING_URL, json=payload)

    with pytest.raises(NotFoundError) as info:
        resolve("Zzqxnotacity")

    assert info.value.kind is ErrorKind.NOT_FOUND


def test_connection_error_is_network_error(requests_mock):
    requests_mock.get(GEOCODING_URL, exc=requests.exceptions.ConnectionError)

    with pytest.raises(NetworkError):
        resolve("London")


def test_timeout_is_network_error(requests_mock):
    requests_mock.get(GEOCODING_URL, exc=requests.exceptions.ConnectTimeout)

    with pytest.raises(NetworkError):
        resolve("London")


def test_server_error_is_network_error(requests_mock):
    requests_mock.get(GEOCODING_URL, status_code=503, text="unavailable")

    with pytest.raises(NetworkError):
        resolve("London")


def test_invalid_json_is_network_error(requests_mock):
    requests_mock.get(GEOCODING_URL, text="<html>oops</html>")

    with pytest.raises(NetworkError):
        resolve("London")


def test_result_without_coordinates_is_network_error(requests_mock):
    requests_mock.get(GEOCODING_URL, json={"results": [{"name": "London"}]})

    with pytest.raises(NetworkError):
        resolve("London")


def test_missing_region_is_absent(requests_mock):
    requests_mock.get(
        GEOCODING_URL,
        json={"results": [{"name": "Monaco", "country": "Monaco", "latitude": 43.73, "longitude": 7.42}]},
    )

    location = resolve("Monaco")

    assert location.region is None
    assert location.label == "Monaco"


@pytest.mark.parametrize("results", [{"x": 1}, {"0x": 1}, 5, "London"])
def test_non_list_results_is_network_error(requests_mock, results):
    requests_mock.get(GEOCODING_URL, json={"results": results})

    with pytest.raises(NetworkError) as info:
        resolve("London")

    assert info.value.kind is ErrorKind.NETWORK_ERROR


def test_non_object_result_is_network_error(requests_mock):
    requests_mock.get(GEOCODING_URL, json={"results": [42]})

    with pytest.raises(NetworkError):
        resolve("London")


def test_null_country_becomes_empty_string(requests_mock):
    requests_mock.get(
        GEOCODING_URL,
        json={"results": [{"name": "Atlantis", "country": None, "latitude": 0.0, "longitude": 0.0}]},
    )

    location = resolve("Atlantis")

    assert location.country == ""
    assert location.label == "Atlantis"
