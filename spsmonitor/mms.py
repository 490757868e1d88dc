"""MMS system records fetched from the simulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from spsmonitor.net import FetchError, _records, _str_field, fetch_json
from spsmonitor.reference import (
    is_valid_bandwidth,
    is_valid_country,
    is_valid_response_time,
    is_valid_sms_provider,
)


@dataclass(frozen=True)
class MMSData:
    """One MMS provider status record."""

    country: str
    provider: str
    bandwidth: str
    response_time: str

    def to_dict(self) -> dict[str, str]:
        return {
            "country": self.country,
            "provider": self.provider,
            "bandwidth": self.bandwidth,
            "response_time": self.response_time,
        }


def _is_valid(mms: MMSData) -> bool:
    return (
        is_valid_country(mms.country)
        and is_valid_bandwidth(mms.bandwidth)
        and is_valid_response_time(mms.response_time)
        and is_valid_sms_provider(mms.provider)
    )


def filter_mms(records: Any) -> list[MMSData]:
    """Build MMS records from decoded JSON, keeping only the valid ones.

    Raises ValueError if the document does not have the expected shape.
    """
    decoded = (
        MMSData(
            country=_str_field(item, "country"),
            provider=_str_field(item, "provider"),
            bandwidth=_str_field(item, "bandwidth"),
            response_time=_str_field(item, "response_time"),
        )
        for item in _records(records)
    )
    return [mms for mms in decoded if _is_valid(mms)]


def fetch_mms(url: str) -> list[MMSData]:
    """Fetch the valid MMS records from the simulator."""
    try:
        return filter_mms(fetch_json(url))
    except ValueError as exc:
        raise FetchError(str(exc)) from exc