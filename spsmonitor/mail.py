"""E-mail system records read from a semicolon-separated data file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from spsmonitor.reference import (
    _atoi,
    _read_lines,
    is_valid_country,
    is_valid_delivery_time,
    is_valid_email_provider,
)


@dataclass(frozen=True)
class EmailData:
    """One e-mail provider status line."""

    country: str
    provider: str
    delivery_time: int

    def to_dict(self) -> dict[str, object]:
        return {
            "country": self.country,
            "provider": self.provider,
            "delivery_time": self.delivery_time,
        }


def parse_email(line: str) -> EmailData | None:
    """Parse a line into an e-mail record, or return None if it is invalid."""
    fields = line.split(";")
    if len(fields) != 3:
        return None
    country, provider, delivery_time = fields
    if not (
        is_valid_country(country)
        and is_valid_email_provider(provider)
        and is_valid_delivery_time(delivery_time)
    ):
        return None
    return EmailData(country, provider, _atoi(delivery_time))


def read_email(path: str | Path) -> list[EmailData]:
    """Read all valid e-mail records from a data file."""
    return [record for line in _read_lines(path) if (record := parse_email(line))]


def slow_fast_providers(
    data: list[EmailData], code: str
) -> tuple[list[EmailData], list[EmailData]]:
    """Return the three slowest and three fastest providers for a country.

    Both lists are in ascending order of delivery time. With fewer than three
    records for the country, both are the whole sorted list.
    """
    by_country = sorted(
        (email for email in data if email.country == code),
        key=lambda email: email.delivery_time,
    )
    if len(by_country) < 3:
        return by_country, list(by_country)
    return by_country[-3:], by_country[:3]