from countrydex.models.country import Country
from countrydex.models.views import NOT_AVAILABLE, CountryCard, CountryDetail


def format_population(population: int) -> str:
    return f"{population:,}"


def primary_currency_name(country: Country) -> str:
    first = next(iter(country.currencies.values()), None)
    return first.name if first else NOT_AVAILABLE


def currency_summary(country: Country) -> str:
    if not country.currencies:
        return NOT_AVAILABLE
    return ", ".join(f"{cur.name} ({code})" for code, cur in country.currencies.items())


def capital_name(country: Country) -> str:
    return country.capital[0] if country.capital else NOT_AVAILABLE


def to_card(country: Country) -> CountryCard:
    return CountryCard(
        code=country.code,
        name=country.common_name,
        region=country.region,
        currency=primary_currency_name(country),
        flag_url=country.flag_image_url,
        flag_alt=country.flag_alt or country.common_name,
    )


def to_detail(country: Country) -> CountryDetail:
    return CountryDetail(
        code=country.code,
        name=country.common_name,
        official_name=country.official_name,
        flag_url=country.flag_image_url,
        capital=capital_name(country),
        population=format_population(country.population),
        region=country.region,
        currencies=currency_summary(country),
        map_url=country.map_url,
    )
