import time
from fastapi import APIRouter, Request

from countrydex import __version__
from countrydex.dependencies import get_directory

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(request: Request):
    directory = get_directory(request)
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": __version__,
        "countries": {
            "status": directory.status.value,
            "loaded": len(directory.countries),
            "error": directory.error,
        },
    }
