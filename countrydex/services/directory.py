import logging
from enum import Enum

import httpx

from countrydex.models.country import Country
from countrydex.models.filters import FilterQuery
from countrydex.services.country_loader import LoadError, fetch_countries, sort_countries
from countrydex.services.filter_service import filter_countries

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class CountryDirectory:
    """Owns the master country list and its load state for one app instance."""

    def __init__(self):
        self._countries: tuple[Country, ...] = ()
        self._by_code: dict[str, Country] = {}
        self.status = LoadStatus.IDLE
        self.error: str | None = None

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    @property
    def ready(self) -> bool:
        return self.status == LoadStatus.READY

    def publish(self, countries: list[Country]) -> None:
        """Replace the master list wholesale."""
        ordered = tuple(sort_countries(countries))
        self._countries = ordered
        self._by_code = {c.code: c for c in ordered}
        self.status = LoadStatus.READY
        self.error = None

    def begin_load(self, force: bool = False) -> bool:
        """Mark a load as started. Returns False if one is not needed."""
        if self.status == LoadStatus.LOADING:
            return False
        if self.status == LoadStatus.READY and not force:
            return False
        self.status = LoadStatus.LOADING
        return True

    async def refresh(self, client: httpx.AsyncClient) -> bool:
        self.status = LoadStatus.LOADING
        try:
            countries = await fetch_countries(client)
        except LoadError as e:
            logger.error("Error loading countries: %s", e)
            self.status = LoadStatus.FAILED
            self.error = str(e)
            return False
        self.publish(countries)
        return True

    def get_by_code(self, code: str) -> Country | None:
        return self._by_code.get(code.upper())

    def filter(self, query: FilterQuery) -> list[Country]:
        return filter_countries(self._countries, query)
