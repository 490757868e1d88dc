"""Assembling the combined status report of every service."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field, replace
from operator import attrgetter
from typing import TypeVar

from spsmonitor.billing import BillingData, read_billing
from spsmonitor.incident import IncidentData, fetch_incidents
from spsmonitor.mail import EmailData, read_email, slow_fast_providers
from spsmonitor.mms import MMSData, fetch_mms
from spsmonitor.net import FetchError
from spsmonitor.reference import COUNTRY_CODES, code_to_country
from spsmonitor.sms import SMSData, read_sms
from spsmonitor.support import SupportData, fetch_support
from spsmonitor.voice import VoiceCallData, read_voice

LOW_LOAD = 1
AVG_LOAD = 2
HIGH_LOAD = 3

SMS_FILENAME = "/sms.data"
EMAIL_FILENAME = "/email.data"
BILLING_FILENAME = "/billing.data"
VOICE_FILENAME = "/voice.data"

MMS_URL = "/mms"
SUPPORT_URL = "/support"
INCIDENT_URL = "/accendent"

_Record = TypeVar("_Record", SMSData, MMSData)


def _float32_json(value: float) -> float:
    """Return the shortest decimal that rounds back to the same float32."""
    if not math.isfinite(value):
        return value
    for digits in range(1, 10):
        candidate = float(f"{value:.{digits}g}")
        if struct.unpack("<f", struct.pack("<f", candidate))[0] == value:
            return candidate
    return value


def _voice_dict(voice: VoiceCallData) -> dict[str, object]:
    document = voice.to_dict()
    document["connection_stability"] = _float32_json(voice.stability)
    return document


def _views_dict(views):
    if views is None:
        return None
    return [[record.to_dict() for record in view] for view in views]


@dataclass
class ResultSet:
    """Status of every service; None marks data that was not collected."""

    sms: list[list[SMSData]] | None = None
    mms: list[list[MMSData]] | None = None
    voice_call: list[VoiceCallData] | None = None
    email: dict[str, list[list[EmailData]]] | None = None
    billing: BillingData = field(default_factory=BillingData)
    support: list[int] | None = None
    incidents: list[IncidentData] | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "sms": _views_dict(self.sms),
            "mms": _views_dict(self.mms),
            "voice_call": (
                None
                if self.voice_call is None
                else [_voice_dict(voice) for voice in self.voice_call]
            ),
            "email": (
                None
                if self.email is None
                else {code: _views_dict(views) for code, views in sorted(self.email.items())}
            ),
            "billing": self.billing.to_dict(),
            "support": None if self.support is None else list(self.support),
            "incident": (
                None
                if self.incidents is None
                else [incident.to_dict() for incident in self.incidents]
            ),
        }


def _named_views(records: list[_Record]) -> list[list[_Record]]:
    named = [replace(record, country=code_to_country(record.country)) for record in records]
    return [
        sorted(named, key=attrgetter("provider")),
        sorted(named, key=attrgetter("country")),
    ]


def sms_views(records: list[SMSData]) -> list[list[SMSData]]:
    """Return SMS records with full country names, sorted by provider and by country."""
    return _named_views(records)


def mms_views(records: list[MMSData]) -> list[list[MMSData]]:
    """Return MMS records with full country names, sorted by provider and by country."""
    return _named_views(records)


def email_by_country(records: list[EmailData]) -> dict[str, list[list[EmailData]]]:
    """Map each country with at least three providers to its slowest and fastest three."""
    result = {}
    for code in sorted(COUNTRY_CODES):
        slow, fast = slow_fast_providers(records, code)
        if len(slow) > 2 and len(fast) > 2:
            result[code] = [slow, fast]
    return result


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def support_load(tickets: list[SupportData]) -> list[int]:
    """Return [load level, expected wait in minutes], or [] with no tickets."""
    if not tickets:
        return []
    active = sum(ticket.active_tickets for ticket in tickets)
    average_time = _trunc_div(active * 60, 18)
    if 9 <= active <= 16:
        load = AVG_LOAD
    elif active > 16:
        load = HIGH_LOAD
    else:
        load = LOW_LOAD
    return [load, average_time]


def sort_incidents(incidents: list[IncidentData]) -> list[IncidentData]:
    """Return the incidents sorted by status, active ones first."""
    return sorted(incidents, key=attrgetter("status"))


def collect_results(api_addr: str, data_path: str) -> ResultSet:
    """Collect the status of every service.

    Raises OSError for unreadable data files and FetchError for failed
    requests; a failure to fetch incidents yields an empty incident list.
    """
    sms = sms_views(read_sms(data_path + SMS_FILENAME))
    mms = mms_views(fetch_mms(api_addr + MMS_URL))
    voice = read_voice(data_path + VOICE_FILENAME)
    email = email_by_country(read_email(data_path + EMAIL_FILENAME))
    billing = read_billing(data_path + BILLING_FILENAME)
    support = support_load(fetch_support(api_addr + SUPPORT_URL))
    try:
        incidents = sort_incidents(fetch_incidents(api_addr + INCIDENT_URL))
    except FetchError:
        incidents = []
    return ResultSet(
        sms=sms,
        mms=mms,
        voice_call=voice,
        email=email,
        billing=billing,
        support=support,
        incidents=incidents,
    )