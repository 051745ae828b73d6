from collections.abc import Iterable

from countrydex.models.country import Country
from countrydex.models.filters import ALL, FilterQuery, PopulationBucket

SMALL_MAX = 1_000_000
MEDIUM_MAX = 50_000_000
LARGE_MAX = 250_000_000


def classify_population(population: int) -> PopulationBucket:
    # 1M and 50M are medium, 250M is large
    if population < SMALL_MAX:
        return PopulationBucket.SMALL
    if population <= MEDIUM_MAX:
        return PopulationBucket.MEDIUM
    if population <= LARGE_MAX:
        return PopulationBucket.LARGE
    return PopulationBucket.XLARGE


def matches(country: Country, query: FilterQuery) -> bool:
    matches_text = query.text.casefold() in country.common_name.casefold()
    matches_region = query.region == ALL or country.region == query.region
    matches_population = (
        query.population == PopulationBucket.ALL
        or classify_population(country.population) == query.population
    )
    return matches_text and matches_region and matches_population


def filter_countries(master: Iterable[Country], query: FilterQuery) -> list[Country]:
    return [c for c in master if matches(c, query)]
