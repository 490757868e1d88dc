"""Incident history fetched from the simulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from spsmonitor.net import FetchError, _records, _str_field, fetch_json
from spsmonitor.reference import is_valid_status


@dataclass(frozen=True)
class IncidentData:
    """One incident and its current status."""

    topic: str
    status: str

    def to_dict(self) -> dict[str, str]:
        return {"topic": self.topic, "status": self.status}


def filter_incidents(records: Any) -> list[IncidentData]:
    """Build incidents from decoded JSON, keeping those with a known status.

    Raises ValueError if the document does not have the expected shape.
    """
    incidents = (
        IncidentData(topic=_str_field(item, "topic"), status=_str_field(item, "status"))
        for item in _records(records)
    )
    return [incident for incident in incidents if is_valid_status(incident.status)]


def fetch_incidents(url: str) -> list[IncidentData]:
    """Fetch the incidents with a known status from the simulator."""
    try:
        return filter_incidents(fetch_json(url))
    except ValueError as exc:
        raise FetchError(str(exc)) from exc