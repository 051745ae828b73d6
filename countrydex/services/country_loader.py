"""Country loader for the REST Countries API (free, no API key required)."""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from countrydex.config import settings
from countrydex.models.country import Country
from countrydex.utils.collation import collation_key

logger = logging.getLogger(__name__)

_COUNTRY_LIST = TypeAdapter(list[Country])


class LoadError(Exception):
    """The country list could not be fetched or parsed."""


def sort_countries(countries: list[Country]) -> list[Country]:
    return sorted(countries, key=lambda c: collation_key(c.common_name))


async def fetch_countries(
    client: httpx.AsyncClient,
    url: str | None = None,
    fields: list[str] | None = None,
) -> list[Country]:
    """Fetch every country in one request and return them sorted by name.

    Raises LoadError on transport failure, a non-2xx status or a payload
    that is not a list of country records.
    """
    url = url or settings.countries_api_url
    fields = fields or settings.countries_api_fields

    try:
        response = await client.get(url, params={"fields": ",".join(fields)})
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as e:
        raise LoadError(f"Country API returned {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise LoadError(f"Country API request failed: {e!r}") from e
    except ValueError as e:
        raise LoadError("Country API returned invalid JSON") from e

    if not isinstance(payload, list):
        raise LoadError(f"Expected a JSON array, got {type(payload).__name__}")

    try:
        countries = _COUNTRY_LIST.validate_python(payload)
    except ValidationError as e:
        raise LoadError(f"Malformed country payload: {e.error_count()} error(s)") from e

    seen: set[str] = set()
    for c in countries:
        if c.code in seen:
            raise LoadError(f"Duplicate country code {c.code}")
        seen.add(c.code)

    logger.info("Total countries loaded: %d", len(countries))
    return sort_countries(countries)
