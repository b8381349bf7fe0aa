"""
Shared HTTP GET for the Open-Meteo abilities.

Every transport problem (connection error, timeout, non-2xx status,
undecodable body) comes out as a single NetworkError.
"""

import logging
from typing import Optional

import requests

from abilities.errors import NetworkError
from config import HTTP_TIMEOUT

log = logging.getLogger(__name__)


def get_json(url: str, params: dict, session: Optional[requests.Session] = None) -> dict:
    """Issue exactly one GET and return the decoded JSON object."""
    http = session or requests
    try:
        resp = http.get(url, params=params, timeout=HTTP_TIMEOUT)
        resp.raise_for_status()
    except requests.Timeout as exc:
        log.warning(f"Request to {url} timed out")
        raise NetworkError("timeout") from exc
    except requests.HTTPError as exc:
        log.warning(f"{url} returned {exc.response.status_code}")
        raise NetworkError(f"HTTP {exc.response.status_code}") from exc
    except requests.RequestException as exc:
        log.warning(f"Request to {url} failed: {exc}")
        raise NetworkError("request failed") from exc

    try:
        data = resp.json()
    except ValueError as exc:
        log.error(f"Invalid JSON from {url}")
        raise NetworkError("invalid json") from exc
    if not isinstance(data, dict):
        raise NetworkError("unexpected payload")
    return data
