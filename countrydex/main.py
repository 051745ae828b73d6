import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from countrydex import __version__
from countrydex.config import settings
from countrydex.routers import countries, directory, gate, health
from countrydex.services.directory import CountryDirectory

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

app = FastAPI(title="Country Directory", version=__version__)

app.state.limiter = limiter
app.state.directory = CountryDirectory()
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount(
    "/static",
    StaticFiles(directory=Path(__file__).resolve().parent / "static"),
    name="static",
)

app.include_router(health.router)
app.include_router(gate.router)
app.include_router(directory.router)
app.include_router(countries.router)


@app.on_event("startup")
async def startup():
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Country directory is running, source: %s", settings.countries_api_url)


@app.on_event("shutdown")
async def shutdown():
    from countrydex.utils.http_client import close_client
    await close_client()
