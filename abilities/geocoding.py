"""
Geocoding ability — resolve a free-text place name to a Location.

Uses the Open-Meteo geocoding API and keeps only the top-ranked match.
"""

import logging
from typing import Optional

import requests

from abilities.errors import EmptyInputError, NetworkError, NotFoundError
from abilities.transport import get_json
from config import GEOCODING_LANGUAGE, GEOCODING_URL
from models import Location

log = logging.getLogger(__name__)


def resolve(name: str, session: Optional[requests.Session] = None) -> Location:
    """Look up `name` and return its best match.

    Raises EmptyInputError without touching the network when the name is
    blank, NotFoundError when nothing matches and NetworkError for any
    transport or payload problem.
    """
    city = (name or "").strip()
    if not city:
        raise EmptyInputError("empty city name")

    data = get_json(
        GEOCODING_URL,
        params={"name": city, "count": 1, "language": GEOCODING_LANGUAGE, "format": "json"},
        session=session,
    )
    results = data.get("results")
    if results is None or results == []:
        log.info(f"No geocoding match for {city!r}")
        raise NotFoundError(city)
    if not isinstance(results, list):
        log.error(f"Malformed geocoding results for {city!r}: {results!r}")
        raise NetworkError("malformed geocoding results")

    top = None
    try:
        top = results[0]
        location = Location(
            name=top.get("name") or city,
            country=top.get("country") or "",
            region=top.get("admin1") or None,
            latitude=float(top["latitude"]),
            longitude=float(top["longitude"]),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        log.error(f"Malformed geocoding result for {city!r}: {top!r}")
        raise NetworkError("malformed geocoding result") from exc

    log.info(f"Resolved {city!r} to {location.label} ({location.latitude}, {location.longitude})")
    return location
