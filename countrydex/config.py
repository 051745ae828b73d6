import json
from typing import Annotated

from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator
from pathlib import Path


def _split_list(v):
    if isinstance(v, str):
        # Accept JSON array or comma-separated string
        v = v.strip()
        if v.startswith("["):
            return json.loads(v)
        return [s.strip() for s in v.split(",") if s.strip()]
    return v


class Settings(BaseSettings):
    countries_api_url: str = "https://restcountries.com/v3.1/all"
    countries_api_fields: Annotated[list[str], NoDecode] = [
        "name", "flags", "cca3", "region", "capital", "population", "maps", "currencies",
    ]
    request_timeout_seconds: float = 10.0
    debounce_ms: int = 200
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:8000", "http://127.0.0.1:8000"]
    rate_limit_enabled: bool = True
    log_level: str = "INFO"

    @field_validator("cors_origins", "countries_api_fields", mode="before")
    @classmethod
    def parse_list(cls, v):
        return _split_list(v)

    model_config = {
        "env_file": str(Path(__file__).resolve().parent.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
