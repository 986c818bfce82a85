from __future__ import annotations

import json
from collections.abc import Callable
from urllib.parse import parse_qs

import httpx
import pytest

from domain.models import FormRecord


def valid_record(**overrides) -> FormRecord:
    values = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "current_address": "12 Analytical Way",
        "employment_status": "Full-time",
        "monthly_income": "5200",
        "desired_move_in_date": "2026-12-01",
        "number_of_occupants": "2",
        "has_pets": True,
        "pet_details": "one cat",
        "credit_score": "720",
        "additional_notes": "",
    }
    values.update(overrides)
    return FormRecord(**values)


class Recorder:
    """MockTransport handler that records every request it answers."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.respond(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def form(self, i: int = -1) -> dict[str, str]:
        parsed = parse_qs(self.requests[i].content.decode())
        return {k: v[0] for k, v in parsed.items()}

    def json(self, i: int = -1):
        return json.loads(self.requests[i].content)


@pytest.fixture
def record() -> FormRecord:
    return valid_record()


@pytest.fixture
def recorder_factory():
    return Recorder


@pytest.fixture
def make_record():
    return valid_record
