from pydantic import AliasChoices, AliasPath, BaseModel, ConfigDict, Field, field_validator


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    symbol: str | None = None


class Country(BaseModel):
    """A single REST Countries record, flattened.

    Validates straight from the API payload (``name.common``, ``cca3``,
    ``flags.svg`` ...) and also accepts the flat field names, which is
    what fixtures use.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(validation_alias=AliasChoices("cca3", "code"))
    common_name: str = Field(
        validation_alias=AliasChoices(AliasPath("name", "common"), "common_name")
    )
    official_name: str = Field(
        default="",
        validation_alias=AliasChoices(AliasPath("name", "official"), "official_name"),
    )
    region: str
    population: int = Field(ge=0)
    capital: tuple[str, ...] | None = None
    flag_image_url: str = Field(
        validation_alias=AliasChoices(AliasPath("flags", "svg"), "flag_image_url")
    )
    flag_alt: str = Field(
        default="",
        validation_alias=AliasChoices(AliasPath("flags", "alt"), "flag_alt"),
    )
    map_url: str = Field(
        validation_alias=AliasChoices(AliasPath("maps", "googleMaps"), "map_url")
    )
    currencies: dict[str, Currency] = {}

    @field_validator("currencies", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return v or {}
