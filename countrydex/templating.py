from pathlib import Path

from fastapi.templating import Jinja2Templates

from countrydex.models.country import Country
from countrydex.models.filters import BUCKET_LABELS, REGIONS
from countrydex.services.presenter import to_card, to_detail

templates = Jinja2Templates(directory=Path(__file__).resolve().parent / "templates")
templates.env.globals.update(regions=REGIONS, buckets=BUCKET_LABELS)


def render_grid(countries: list[Country]) -> str:
    """Render the card grid fragment, or the no-results placeholder."""
    cards = [to_card(c) for c in countries]
    return templates.get_template("_grid.html").render(cards=cards)


def render_detail(country: Country) -> str:
    return templates.get_template("_detail.html").render(detail=to_detail(country))


def render_status(status: str) -> str:
    """Spinner or connection-error message shown in place of the grid."""
    return templates.get_template("_status.html").render(status=status)
