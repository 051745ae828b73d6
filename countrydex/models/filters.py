from enum import Enum

from pydantic import BaseModel

ALL = "all"

REGIONS = ["Africa", "Americas", "Antarctic", "Asia", "Europe", "Oceania"]


class PopulationBucket(str, Enum):
    ALL = "all"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


BUCKET_LABELS = {
    PopulationBucket.ALL: "All Populations",
    PopulationBucket.SMALL: "Small (< 1M)",
    PopulationBucket.MEDIUM: "Medium (1M - 50M)",
    PopulationBucket.LARGE: "Large (50M - 250M)",
    PopulationBucket.XLARGE: "Very Large (> 250M)",
}


class FilterQuery(BaseModel):
    text: str = ""
    region: str = ALL
    population: PopulationBucket = PopulationBucket.ALL
