import asyncio
import contextlib
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from countrydex.config import settings
from countrydex.dependencies import filter_query, get_directory, require_ready
from countrydex.models.filters import FilterQuery
from countrydex.services.debounce import Debouncer
from countrydex.services.directory import CountryDirectory, LoadStatus
from countrydex.templating import render_detail, render_grid, render_status, templates
from countrydex.utils.http_client import get_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/directory", tags=["directory"])

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("", response_class=HTMLResponse)
async def directory_page(request: Request, query: FilterQuery = Depends(filter_query)):
    directory = get_directory(request)
    if directory.status == LoadStatus.IDLE:
        return RedirectResponse(request.url_for("gate"), status_code=303)

    grid = render_grid(directory.filter(query)) if directory.ready else ""
    return templates.TemplateResponse(
        request,
        "directory.html",
        {"status": directory.status.value, "query": query, "grid": grid},
    )


@router.get("/grid", response_class=HTMLResponse)
async def grid_fragment(
    query: FilterQuery = Depends(filter_query),
    directory: CountryDirectory = Depends(get_directory),
):
    require_ready(directory)
    return HTMLResponse(render_grid(directory.filter(query)))


@router.get("/countries/{code}", response_class=HTMLResponse)
async def country_detail(code: str, directory: CountryDirectory = Depends(get_directory)):
    country = directory.get_by_code(code)
    if country is None:
        # Stale card after a reload; the client keeps the overlay hidden.
        logger.debug("No country with code %s", code)
        return Response(status_code=204)
    return HTMLResponse(render_detail(country))


@router.post("/reload")
@limiter.limit("5/minute")
async def reload_countries(request: Request, background_tasks: BackgroundTasks):
    directory = get_directory(request)
    if directory.begin_load(force=True):
        background_tasks.add_task(directory.refresh, get_client())
    return RedirectResponse(request.url_for("directory_page"), status_code=303)


@router.websocket("/ws")
async def filter_channel(websocket: WebSocket):
    """Receive filter queries as JSON and answer with debounced grid fragments."""
    directory = get_directory(websocket)
    await websocket.accept()

    outbox: asyncio.Queue[FilterQuery] = asyncio.Queue()
    debouncer = Debouncer(settings.debounce_ms / 1000, outbox.put_nowait)
    sender = asyncio.create_task(_send_grids(websocket, directory, outbox))

    try:
        while True:
            payload = await websocket.receive_text()
            try:
                query = FilterQuery.model_validate_json(payload)
            except ValidationError as e:
                logger.warning("Ignoring invalid filter payload: %s", e)
                continue
            debouncer.trigger(query)
    except WebSocketDisconnect:
        logger.debug("Filter channel closed")
    finally:
        debouncer.cancel()
        sender.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sender


async def _send_grids(websocket: WebSocket, directory: CountryDirectory, outbox: asyncio.Queue):
    while True:
        query = await outbox.get()
        try:
            # Until the list is ready the client keeps the spinner or error message
            if directory.ready:
                html = render_grid(directory.filter(query))
            else:
                html = render_status(directory.status.value)
        except Exception:
            logger.exception("Failed to render grid for %s", query)
            continue
        await websocket.send_text(html)
