"""SMS system records read from a semicolon-separated data file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from spsmonitor.reference import (
    _read_lines,
    is_valid_bandwidth,
    is_valid_country,
    is_valid_response_time,
    is_valid_sms_provider,
)


@dataclass(frozen=True)
class SMSData:
    """One SMS provider status line."""

    country: str
    bandwidth: str
    response_time: str
    provider: str

    def to_dict(self) -> dict[str, str]:
        return {
            "country": self.country,
            "bandwidth": self.bandwidth,
            "response_time": self.response_time,
            "provider": self.provider,
        }


def parse_sms(line: str) -> SMSData | None:
    """Parse a line into an SMS record, or return None if it is invalid."""
    fields = line.split(";")
    if len(fields) < 4:
        return None
    country, bandwidth, response_time, provider = fields[:4]
    if not (
        is_valid_country(country)
        and is_valid_bandwidth(bandwidth)
        and is_valid_response_time(response_time)
        and is_valid_sms_provider(provider)
    ):
        return None
    return SMSData(country, bandwidth, response_time, provider)


def read_sms(path: str | Path) -> list[SMSData]:
    """Read all valid SMS records from a data file."""
    return [record for line in _read_lines(path) if (record := parse_sms(line))]