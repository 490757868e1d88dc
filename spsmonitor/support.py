"""Support system ticket counts fetched from the simulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from spsmonitor.net import FetchError, _int_field, _records, _str_field, fetch_json


@dataclass(frozen=True)
class SupportData:
    """Number of active tickets on one support topic."""

    topic: str
    active_tickets: int

    def to_dict(self) -> dict[str, object]:
        return {"topic": self.topic, "active_tickets": self.active_tickets}


def parse_support(records: Any) -> list[SupportData]:
    """Build support records from decoded JSON.

    Raises ValueError if the document does not have the expected shape.
    """
    return [
        SupportData(
            topic=_str_field(item, "topic"),
            active_tickets=_int_field(item, "active_tickets"),
        )
        for item in _records(records)
    ]


def fetch_support(url: str) -> list[SupportData]:
    """Fetch the support records from the simulator."""
    try:
        return parse_support(fetch_json(url))
    except ValueError as exc:
        raise FetchError(str(exc)) from exc