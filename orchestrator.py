"""
Orchestrator — runs query cycles and owns the current QueryState.

A query cycle is one user-triggered attempt to go from a typed city
name to a displayed result or error:

  Idle → Loading → Success | Failure → (next submit or reset) → ...

Architecture:
  - The resolver and the weather fetcher run strictly one after the
    other; the first failure short-circuits the cycle
  - Blocking HTTP calls run in a worker thread so the event loop of the
    Telegram bot stays responsive
  - Every submit gets a sequence number; a result that finishes after a
    newer submit started is dropped instead of overwriting newer state
  - Only this class writes the state; everyone else reads `state` or
    listens for transitions
"""

from __future__ import annotations
import asyncio
import itertools
import logging
from typing import Callable, Optional

from abilities.errors import QueryError
from abilities.geocoding import resolve
from abilities.weather import fetch_weather
from models import (
    CurrentConditions,
    DailyForecast,
    ErrorKind,
    Failure,
    Idle,
    Loading,
    Location,
    QueryState,
    Success,
)

log = logging.getLogger(__name__)

Resolver = Callable[[str], Location]
Fetcher = Callable[[float, float], tuple[CurrentConditions, DailyForecast]]
Listener = Callable[[QueryState], None]


class WeatherOrchestrator:
    def __init__(self, resolver: Resolver = resolve, fetcher: Fetcher = fetch_weather):
        self._resolver = resolver
        self._fetcher = fetcher
        self._state: QueryState = Idle()
        self._seq = itertools.count(1)
        self._latest = 0
        self._listeners: list[Listener] = []

    @property
    def state(self) -> QueryState:
        return self._state

    def add_listener(self, callback: Listener):
        """
        Register a callback for state transitions.
        callback(state) — called after every change, including Loading.
        """
        self._listeners.append(callback)

    # ── Transitions ─────────────────────────────────────────────

    async def submit(self, text: str) -> QueryState:
        """
        Run one full query cycle for `text`.

        Returns the state this cycle produced. If a newer submit started
        meanwhile, that result is returned but not applied.
        """
        seq = next(self._seq)
        self._latest = seq
        query = (text or "").strip()
        self._set_state(Loading(query=query))

        result = await self._run(query)

        if seq != self._latest:
            log.info(f"Dropping stale result for {query!r} (query #{seq}, latest #{self._latest})")
            return result
        self._set_state(result)
        return result

    def reset(self) -> QueryState:
        """Return to Idle and invalidate any cycle still in flight."""
        self._latest = next(self._seq)
        self._set_state(Idle())
        return self._state

    # ── Pipeline ────────────────────────────────────────────────

    async def _run(self, query: str) -> QueryState:
        try:
            location = await asyncio.to_thread(self._resolver, query)
            current, daily = await asyncio.to_thread(
                self._fetcher, location.latitude, location.longitude
            )
        except QueryError as e:
            log.info(f"Query {query!r} failed: {e.kind.value}")
            return Failure(query=query, kind=e.kind)
        except Exception:
            # Loading must always end
            log.exception(f"Query {query!r} crashed")
            return Failure(query=query, kind=ErrorKind.NETWORK_ERROR)
        return Success(query=query, location=location, current=current, daily=tuple(daily))

    def _set_state(self, state: QueryState):
        self._state = state
        for callback in self._listeners:
            callback(state)
