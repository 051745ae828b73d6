from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from countrydex.config import settings
from countrydex.dependencies import get_directory
from countrydex.templating import templates
from countrydex.utils.http_client import get_client

router = APIRouter(tags=["gate"])

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/", response_class=HTMLResponse)
async def gate(request: Request):
    return templates.TemplateResponse(request, "gate.html")


# The form fields are not checked; submitting is what opens the directory.
@router.post("/enter")
@limiter.limit("10/minute")
async def enter(request: Request, background_tasks: BackgroundTasks):
    directory = get_directory(request)
    if directory.begin_load():
        background_tasks.add_task(directory.refresh, get_client())
    return RedirectResponse(request.url_for("directory_page"), status_code=303)
