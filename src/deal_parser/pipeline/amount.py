"""
Monetary amount and currency extraction.

Two pattern families are scanned:
1. Currency-adjacent amounts ("$1,500", "₹50k", "1500 USD", "2k rupees").
   Every match becomes a candidate; the one mentioned LAST wins, since in a
   negotiation thread the final figure is the offer that stands.
2. Bare amounts ("5k", "budget: 1200"), only consulted when family 1 found
   nothing. The first bare match wins and carries no currency.

If no amount-bound currency was found, the text is scanned once more for a
stand-alone currency signal ("paid in dollars").
"""

import math
import re
from dataclasses import dataclass
from operator import attrgetter
from typing import NamedTuple

import structlog

from ..models import Currency

logger = structlog.get_logger(__name__)


# =============================================================================
# Patterns
# =============================================================================

# Word tokens are fenced by letters only, so "INR90,000" and "1500rs" still
# match while "offers 2" and "hours 5" do not.
_CURRENCY_TOKEN = (
    r"(?:\$|₹|(?<![a-z])(?:usd|inr|rupees?|dollars?|rs)(?![a-z])\.?)"
)
_AMOUNT = r"[\d.,]+"
_MULTIPLIER = r"(?:(?P<multiplier>[km])(?![a-z]))?"

_LEFT_CURRENCY_PATTERN = re.compile(
    rf"(?P<currency>{_CURRENCY_TOKEN})\s*(?P<amount>{_AMOUNT})\s*{_MULTIPLIER}",
    re.IGNORECASE,
)
# Amounts before the currency may only start at the head of a numeric run;
# retrying inside a long run of digits would make the scan quadratic.
_RIGHT_CURRENCY_PATTERN = re.compile(
    rf"(?<![\d.,])(?P<amount>{_AMOUNT})\s*{_MULTIPLIER}\s*(?P<currency>{_CURRENCY_TOKEN})",
    re.IGNORECASE,
)

# Scan order matters for ties: a right-currency match starting at the same
# offset as a left-currency match is treated as the later mention.
CURRENCY_ADJACENT_PATTERNS: tuple[re.Pattern, ...] = (
    _LEFT_CURRENCY_PATTERN,
    _RIGHT_CURRENCY_PATTERN,
)

BARE_AMOUNT_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        r'(?<!\d)(?<!\d[.,])\b(?P<amount>[\d.,]+)\s*(?P<multiplier>[km])\b',
        re.IGNORECASE,
    ),
    re.compile(
        r'\b(?:budget|rate|pricing|price|cost|fee|pay|payment|for)\s*[:\-]?\s*'
        r'(?P<amount>[\d.,]+)\b',
        re.IGNORECASE,
    ),
)

# Priority order for the stand-alone currency scan: USD signals first.
CURRENCY_SIGNAL_PATTERNS: tuple[tuple[re.Pattern, Currency], ...] = (
    (re.compile(r'\$'), Currency.USD),
    (re.compile(r'\bUSD\b', re.IGNORECASE), Currency.USD),
    (re.compile(r'\bu\.?s\.?\s*dollars?\b', re.IGNORECASE), Currency.USD),
    (re.compile(r'\bdollars?\b', re.IGNORECASE), Currency.USD),
    (re.compile('₹'), Currency.INR),
    (re.compile(r'\bINR\b', re.IGNORECASE), Currency.INR),
    (re.compile(r'\brs\.?\b', re.IGNORECASE), Currency.INR),
    (re.compile(r'\brupees?\b', re.IGNORECASE), Currency.INR),
)

_DECIMAL_COMMA = re.compile(r',\d{1,2}$')
_NUMERIC_PREFIX = re.compile(r'\d+(?:\.\d*)?|\.\d+')
_WHITESPACE = re.compile(r'\s+')

_MULTIPLIERS = {'k': 1_000, 'm': 1_000_000}


# =============================================================================
# Data Structures
# =============================================================================


class MonetaryMatch(NamedTuple):
    """Amount and currency resolved from one message."""

    amount: float | None
    currency: Currency | None


@dataclass(frozen=True)
class AmountCandidate:
    """A currency-tagged amount and where it starts in the text."""

    amount: float
    currency: Currency
    position: int


# =============================================================================
# Parsing helpers
# =============================================================================


def parse_numeric_value(raw: str, multiplier: str | None = None) -> float | None:
    """
    Parse a loosely formatted number such as "1,500", "1.5" or "1,5".

    Comma handling:
    - with a period present, commas are thousands separators
    - alone, a comma followed by exactly 1-2 trailing digits is a decimal
      separator, otherwise a thousands separator

    Args:
        raw: Digits with optional separators
        multiplier: Optional "k" (x1000) or "m" (x1,000,000), any case

    Returns:
        Positive finite value, or None when the text does not parse to one
    """
    cleaned = _WHITESPACE.sub('', raw.strip())

    if ',' in cleaned and '.' in cleaned:
        cleaned = cleaned.replace(',', '')
    elif ',' in cleaned:
        if _DECIMAL_COMMA.search(cleaned):
            cleaned = cleaned.replace(',', '.', 1)
        else:
            cleaned = cleaned.replace(',', '')

    prefix = _NUMERIC_PREFIX.match(cleaned)
    if prefix is None:
        return None

    value = float(prefix.group(0))
    if not math.isfinite(value) or value <= 0:
        return None

    factor = _MULTIPLIERS.get((multiplier or '').lower(), 1)
    value *= factor
    if not math.isfinite(value):
        return None
    return value


def normalize_currency(token: str) -> Currency | None:
    """Map a matched currency token ("$", "Rs.", "rupees", ...) to a Currency."""
    lowered = token.lower()
    if '$' in lowered or 'usd' in lowered or 'dollar' in lowered:
        return Currency.USD
    if '₹' in lowered or 'inr' in lowered or 'rupee' in lowered or 'rs' in lowered:
        return Currency.INR
    return None


def _currency_adjacent_candidates(text: str) -> list[AmountCandidate]:
    candidates: list[AmountCandidate] = []
    for pattern in CURRENCY_ADJACENT_PATTERNS:
        for match in pattern.finditer(text):
            currency = normalize_currency(match.group('currency'))
            if currency is None:
                continue
            amount = parse_numeric_value(match.group('amount'), match.group('multiplier'))
            if amount is None:
                continue
            candidates.append(
                AmountCandidate(amount=amount, currency=currency, position=match.start())
            )
    return candidates


def _first_bare_amount(text: str) -> float | None:
    for pattern in BARE_AMOUNT_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        multiplier = match.groupdict().get('multiplier')
        amount = parse_numeric_value(match.group('amount'), multiplier)
        if amount is not None:
            return amount
    return None


def _currency_signal(text: str) -> Currency | None:
    for pattern, currency in CURRENCY_SIGNAL_PATTERNS:
        if pattern.search(text):
            return currency
    return None


# =============================================================================
# Public API
# =============================================================================


def extract_amount_and_currency(text: str) -> MonetaryMatch:
    """
    Find the most likely deal amount and its currency.

    Args:
        text: Trimmed message text

    Returns:
        MonetaryMatch; either field may be None
    """
    candidates = _currency_adjacent_candidates(text)

    if candidates:
        # Last mention wins; sorted() is stable so equal offsets keep scan order.
        best = sorted(candidates, key=attrgetter('position'))[-1]
        if len(candidates) > 1:
            logger.debug(
                'amount.candidates_resolved',
                candidate_count=len(candidates),
                chosen_position=best.position,
            )
        return MonetaryMatch(amount=best.amount, currency=best.currency)

    return MonetaryMatch(amount=_first_bare_amount(text), currency=_currency_signal(text))


def extract_amount(text: str) -> float | None:
    """Most likely deal amount, or None."""
    return extract_amount_and_currency(text).amount


def extract_currency(text: str) -> Currency | None:
    """Currency bound to the chosen amount, else any currency mentioned in the text."""
    return extract_amount_and_currency(text).currency
