"""Shared fixtures: country records, a fake REST Countries API and a virtual clock."""

import httpx
import pytest
from fastapi.testclient import TestClient

from countrydex.main import app
from countrydex.models.country import Country
from countrydex.services.directory import CountryDirectory
from countrydex.utils import http_client


def api_record(code, name, region, population, capital=None, currencies=None, official=None):
    """One record shaped like the REST Countries v3.1 response."""
    record = {
        "cca3": code,
        "name": {"common": name, "official": official or name, "nativeName": {}},
        "region": region,
        "population": population,
        "flags": {
            "png": f"https://flagcdn.com/w320/{code.lower()}.png",
            "svg": f"https://flagcdn.com/{code.lower()}.svg",
            "alt": f"The flag of {name}",
        },
        "maps": {
            "googleMaps": f"https://goo.gl/maps/{code}",
            "openStreetMaps": f"https://www.openstreetmap.org/{code}",
        },
        "currencies": currencies if currencies is not None else {},
    }
    if capital is not None:
        record["capital"] = capital
    return record


@pytest.fixture
def api_payload():
    # Deliberately unsorted
    return [
        api_record(
            "USA", "United States", "Americas", 331_000_000,
            capital=["Washington, D.C."],
            currencies={"USD": {"name": "United States dollar", "symbol": "$"}},
            official="United States of America",
        ),
        api_record("ATA", "Antarctica", "Antarctic", 1000),
        api_record(
            "FRA", "France", "Europe", 67_000_000,
            capital=["Paris"],
            currencies={"EUR": {"name": "Euro", "symbol": "€"}},
            official="French Republic",
        ),
        api_record(
            "ALA", "Åland Islands", "Europe", 29_458,
            capital=["Mariehamn"],
            currencies={"EUR": {"name": "Euro", "symbol": "€"}},
        ),
    ]


@pytest.fixture
def france():
    return Country(
        code="FRA",
        common_name="France",
        region="Europe",
        population=67_000_000,
        capital=("Paris",),
        flag_image_url="https://flagcdn.com/fra.svg",
        map_url="https://goo.gl/maps/FRA",
        currencies={"EUR": {"name": "Euro"}},
    )


@pytest.fixture
def usa():
    return Country(
        code="USA",
        common_name="United States",
        region="Americas",
        population=331_000_000,
        capital=("Washington, D.C.",),
        flag_image_url="https://flagcdn.com/usa.svg",
        map_url="https://goo.gl/maps/USA",
        currencies={"USD": {"name": "US Dollar"}},
    )


@pytest.fixture
def master(france, usa):
    return [france, usa]


@pytest.fixture
def directory():
    fresh = CountryDirectory()
    app.state.directory = fresh
    return fresh


@pytest.fixture
def loaded_directory(directory, master):
    directory.publish(master)
    return directory


@pytest.fixture
def client(directory):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fake_api(monkeypatch, api_payload):
    """Route the shared httpx client to an in-memory REST Countries API.

    Tests may replace ``state["response"]`` with any ``httpx.Response``.
    """
    state = {"requests": [], "response": None}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        if state["response"] is not None:
            return state["response"]
        return httpx.Response(200, json=api_payload)

    monkeypatch.setattr(
        http_client, "_client", httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )
    return state


class _Timer:
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class VirtualClock:
    """A ``call_later`` scheduler that only moves when told to."""

    def __init__(self):
        self.now = 0.0
        self._timers: list[_Timer] = []

    def call_later(self, delay, callback, *args):
        timer = _Timer(self.now + delay, callback, args)
        self._timers.append(timer)
        return timer

    @property
    def scheduled(self):
        return [t for t in self._timers if not t.cancelled]

    def advance(self, seconds):
        self.now += seconds
        due = sorted(
            (t for t in self.scheduled if t.when <= self.now), key=lambda t: t.when
        )
        self._timers = [t for t in self.scheduled if t.when > self.now]
        for timer in due:
            timer.callback(*timer.args)


@pytest.fixture
def clock():
    return VirtualClock()
