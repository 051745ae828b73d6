from fastapi import HTTPException
from starlette.requests import HTTPConnection

from countrydex.models.filters import ALL, FilterQuery, PopulationBucket
from countrydex.services.directory import CountryDirectory


def get_directory(conn: HTTPConnection) -> CountryDirectory:
    return conn.app.state.directory


def require_ready(directory: CountryDirectory) -> None:
    if not directory.ready:
        raise HTTPException(status_code=503, detail="Country list not loaded")


def filter_query(
    search: str = "",
    region: str = ALL,
    population: PopulationBucket = PopulationBucket.ALL,
) -> FilterQuery:
    return FilterQuery(text=search, region=region, population=population)
