"""
Negotiation status classification by keyword scan.

AGREED keywords are checked before NEGOTIATING keywords: "we agreed on the
lower rate" is a closed deal, not an open negotiation. The first keyword
found decides; there is no scoring. Messages with neither are INBOUND.
"""

from ..models import DealStatus

AGREED_KEYWORDS: tuple[str, ...] = (
    'agreed',
    'agree',
    'locked',
    'locked in',
    'confirmed',
    'confirmation',
    'approved',
    'greenlit',
    'green light',
    'go ahead',
    'finalized',
    'signed',
)

NEGOTIATION_KEYWORDS: tuple[str, ...] = (
    'negotiate',
    'negotiating',
    'negotiation',
    'counter',
    'counteroffer',
    'counter-offer',
    'counter offer',
    'pricing',
    'discuss rate',
    'discuss terms',
    'discuss pricing',
    'budget',
    'lower',
    'higher',
    'increase',
    'decrease',
    'offer',
    'proposal',
)

# Checked in this order; the first status with a keyword hit wins.
STATUS_PRECEDENCE: tuple[tuple[DealStatus, tuple[str, ...]], ...] = (
    (DealStatus.AGREED, AGREED_KEYWORDS),
    (DealStatus.NEGOTIATING, NEGOTIATION_KEYWORDS),
)


def classify_status(text: str) -> DealStatus:
    """Classify a message as INBOUND, NEGOTIATING or AGREED."""
    lowered = text.lower()
    for status, keywords in STATUS_PRECEDENCE:
        if any(keyword in lowered for keyword in keywords):
            return status
    return DealStatus.INBOUND
