import json
import logging

import pytest

from ticketanalyzer.models import Ticket


def _ticket_data(**overrides) -> dict:
    data = {
        "origin": "VVO",
        "origin_name": "Владивосток",
        "destination": "TLV",
        "destination_name": "Тель-Авив",
        "departure_date": "12.05.18",
        "departure_time": "16:20",
        "arrival_date": "12.05.18",
        "arrival_time": "22:10",
        "carrier": "TK",
        "stops": 3,
        "price": 12400,
    }
    data.update(overrides)
    return data


@pytest.fixture
def ticket_data():
    """Raw ticket dict as found in tickets.json, with keyword overrides."""
    return _ticket_data


@pytest.fixture
def make_ticket():
    def _make(**overrides) -> Ticket:
        return Ticket(**_ticket_data(**overrides))
    return _make


@pytest.fixture
def write_tickets(tmp_path):
    def _write(payload, name: str = "tickets.json"):
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
