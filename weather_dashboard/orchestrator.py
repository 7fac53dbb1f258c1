# ABOUTME: Search orchestration: runs the provider requests for one city and owns SearchState transitions.
# ABOUTME: Fetches current conditions and forecast concurrently, then the UV index with isolated failure.

import asyncio
import logging
from collections.abc import Callable

import httpx

from weather_dashboard.deps import DashboardDeps
from weather_dashboard.forecast import group_forecast_by_day
from weather_dashboard.models import SearchState, SearchStatus
from weather_dashboard.weather_service import (
    MalformedResponseError,
    get_current_conditions,
    get_forecast,
    get_uv_index,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "City not found. Please try again."

PROVIDER_ERRORS = (httpx.HTTPError, MalformedResponseError)

StateListener = Callable[[SearchState], None]


class WeatherOrchestrator:
    """Owns the dashboard's SearchState and exposes search as its only transition.

    Each search gets a sequence id. Results of a search that has been
    superseded by a newer one are dropped instead of overwriting the newer state.
    """

    def __init__(self, deps: DashboardDeps):
        self.deps = deps
        self._state = SearchState()
        self._sequence = 0
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SearchState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call listener with every new state. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def search(self, city: str) -> SearchState:
        """Look up a city and return the state this search produced. Blank input changes nothing.

        The returned state always describes ``city``, even when a newer search
        has since replaced the orchestrator's current state.
        """
        query = city.strip()
        if not query:
            return self._state

        self._sequence += 1
        seq = self._sequence
        logger.info("Search #%d for %r", seq, query)
        try:
            # Previous results stay visible while loading; only the error is cleared.
            self._transition(
                self._state.model_copy(update={"status": SearchStatus.LOADING, "query": query, "error": None})
            )
            result = await self._fetch(seq, query)
        except BaseException:
            if self._is_latest(seq) and self._state.loading:
                self._transition(_failed(query))
            raise

        if self._is_latest(seq):
            self._transition(result)
        else:
            logger.info("Discarding %s result of superseded search #%d", result.status.value, seq)
        return result

    async def _fetch(self, seq: int, query: str) -> SearchState:
        client, settings = self.deps.http_client, self.deps.settings
        try:
            current, entries = await asyncio.gather(
                get_current_conditions(client, settings, query),
                get_forecast(client, settings, query),
            )
        except PROVIDER_ERRORS as e:
            logger.warning("Search #%d for %r failed: %s", seq, query, e)
            return _failed(query)

        uv_index = None
        try:
            uv_index = await get_uv_index(
                client, settings, current.location.latitude, current.location.longitude
            )
        except PROVIDER_ERRORS as e:
            logger.warning("UV index unavailable for %r: %s", query, e)

        return SearchState(
            status=SearchStatus.SUCCESS,
            query=query,
            current=current,
            forecast=group_forecast_by_day(entries),
            uv_index=uv_index,
        )

    def _is_latest(self, seq: int) -> bool:
        return seq == self._sequence

    def _transition(self, state: SearchState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)


def _failed(query: str) -> SearchState:
    return SearchState(status=SearchStatus.ERROR, query=query, error=NOT_FOUND_MESSAGE)
