"""Voice-call system records read from a semicolon-separated data file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from spsmonitor.reference import (
    _atoi,
    _parse_float32,
    _read_lines,
    is_valid_country,
    is_valid_load,
    is_valid_median_duration,
    is_valid_purity,
    is_valid_response_time,
    is_valid_stability,
    is_valid_ttfb,
    is_valid_voice_provider,
)


@dataclass(frozen=True)
class VoiceCallData:
    """One voice-call provider status line."""

    country: str
    load: str
    response_time: str
    provider: str
    stability: float
    ttfb: int
    purity: int
    median_duration: int

    def to_dict(self) -> dict[str, object]:
        return {
            "country": self.country,
            "bandwidth": self.load,
            "response_time": self.response_time,
            "provider": self.provider,
            "connection_stability": self.stability,
            "ttfb": self.ttfb,
            "voice_purity": self.purity,
            "median_of_call_time": self.median_duration,
        }


def parse_voice(line: str) -> VoiceCallData | None:
    """Parse a line into a voice-call record, or return None if it is invalid."""
    fields = line.split(";")
    if len(fields) != 8:
        return None
    country, load, response_time, provider, stability, ttfb, purity, median = fields
    if not (
        is_valid_country(country)
        and is_valid_load(load)
        and is_valid_response_time(response_time)
        and is_valid_voice_provider(provider)
        and is_valid_stability(stability)
        and is_valid_purity(purity)
        and is_valid_ttfb(ttfb)
        and is_valid_median_duration(median)
    ):
        return None
    return VoiceCallData(
        country=country,
        load=load,
        response_time=response_time,
        provider=provider,
        stability=_parse_float32(stability),
        # The reported TTFB is taken from the response-time column.
        ttfb=_atoi(response_time),
        purity=_atoi(purity),
        median_duration=_atoi(median),
    )


def read_voice(path: str | Path) -> list[VoiceCallData]:
    """Read all valid voice-call records from a data file."""
    return [record for line in _read_lines(path) if (record := parse_voice(line))]