from pydantic import BaseModel

NOT_AVAILABLE = "N/A"


class CountryCard(BaseModel):
    code: str
    name: str
    region: str
    currency: str = NOT_AVAILABLE
    flag_url: str
    flag_alt: str = ""


class CountryDetail(BaseModel):
    code: str
    name: str
    official_name: str = ""
    flag_url: str
    capital: str = NOT_AVAILABLE
    population: str
    region: str
    currencies: str = NOT_AVAILABLE
    map_url: str
