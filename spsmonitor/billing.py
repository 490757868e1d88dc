"""Billing system feature flags read from a six-character bit mask."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_MASK_LENGTH = 6


@dataclass(frozen=True)
class BillingData:
    """Which billing features are currently available."""

    create_customer: bool = False
    purchase: bool = False
    payout: bool = False
    recurring: bool = False
    fraud_control: bool = False
    checkout_page: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            "create_customer": self.create_customer,
            "purchase": self.purchase,
            "payout": self.payout,
            "recurring": self.recurring,
            "fraud_control": self.fraud_control,
            "checkout_page": self.checkout_page,
        }


def parse_billing(mask: bytes | str) -> BillingData:
    """Decode a mask whose rightmost character is the first feature.

    A '1' sets a feature; any other character clears it. A mask that is not
    exactly six bytes long yields every feature off.
    """
    raw = mask.encode("utf-8") if isinstance(mask, str) else bytes(mask)
    if len(raw) != _MASK_LENGTH:
        return BillingData()
    flags = [byte == ord("1") for byte in reversed(raw)]
    return BillingData(*flags)


def read_billing(path: str | Path) -> BillingData:
    """Read and decode the billing mask file."""
    return parse_billing(Path(path).read_bytes())