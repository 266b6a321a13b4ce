"""Loading of the tickets JSON file into typed ``Ticket`` records.

Expected shape::

    {"tickets": [{"origin": "VVO", "destination": "TLV", "carrier": "TK", ...}, ...]}

Every problem with the file (unreadable, invalid JSON, wrong shape, missing or
mistyped ticket field) surfaces as ``LoadError``.
"""
import json
import logging
from os import PathLike
from pathlib import Path
from typing import Any

import dacite

from .errors import LoadError
from .models import Ticket, TicketSet

_DACITE_CONFIG = dacite.Config(check_types=True)
_DERIVED_FIELDS = frozenset({"duration"})
# JSON true/false would pass as int (bool subclasses int)
_INTEGER_FIELDS = ("price", "stops")


def _read_document(path: Path) -> Any:
    try:
        # utf-8-sig: ticket dumps are often saved with a BOM
        with open(path, 'rt', encoding='utf-8-sig') as f:
            return json.load(f)
    except OSError as e:
        raise LoadError(f"Cannot read tickets file {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise LoadError(f"Tickets file {path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Tickets file {path} is not valid JSON: {e}") from e


def parse_ticket(raw: Any, index: int = 0) -> Ticket:
    if not isinstance(raw, dict):
        raise LoadError(f"Ticket #{index} is not a JSON object (got {type(raw).__name__})")
    data = {key: value for key, value in raw.items() if key not in _DERIVED_FIELDS}
    for name in _INTEGER_FIELDS:
        if isinstance(data.get(name), bool):
            raise LoadError(f"Ticket #{index} is invalid: field \"{name}\" must be an integer, got {data[name]!r}")
    try:
        return dacite.from_dict(data_class=Ticket, data=data, config=_DACITE_CONFIG)
    except dacite.DaciteError as e:
        raise LoadError(f"Ticket #{index} is invalid: {e}") from e


def parse_tickets(document: Any) -> TicketSet:
    if not isinstance(document, dict):
        raise LoadError(f"Top-level JSON value must be an object, got {type(document).__name__}")
    if 'tickets' not in document:
        raise LoadError("Missing 'tickets' key")
    raw_tickets = document['tickets']
    if not isinstance(raw_tickets, list):
        raise LoadError(f"'tickets' must be an array, got {type(raw_tickets).__name__}")
    return [parse_ticket(raw, index) for index, raw in enumerate(raw_tickets)]


def load_tickets(path: str | PathLike[str]) -> TicketSet:
    path = Path(path)
    tickets = parse_tickets(_read_document(path))
    logging.info("Loaded %d tickets from %s", len(tickets), path)
    return tickets
