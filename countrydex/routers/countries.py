from fastapi import APIRouter, Depends, HTTPException

from countrydex.dependencies import filter_query, get_directory, require_ready
from countrydex.models.country import Country
from countrydex.models.filters import FilterQuery
from countrydex.services.directory import CountryDirectory

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[Country])
async def list_countries(
    query: FilterQuery = Depends(filter_query),
    directory: CountryDirectory = Depends(get_directory),
):
    require_ready(directory)
    return directory.filter(query)


@router.get("/{code}", response_model=Country)
async def get_country(code: str, directory: CountryDirectory = Depends(get_directory)):
    require_ready(directory)
    country = directory.get_by_code(code)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country
