"""
Deal message parser: composes the extractors into one ExtractedDeal.

Flow:
1. Validate inputs (InvalidInputError on malformed input)
2. Trim the message
3. Run amount/currency, deliverable, brand and status extraction
4. Score confidence from the extracted fields
5. Assemble the frozen ExtractedDeal

Everything is synchronous and side-effect free apart from logging, so the
parser can be shared across threads and requests.
"""

from collections.abc import Sequence
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from ..config import Config
from ..errors import ExtractionError, InvalidInputError, describe_type
from ..logging import PipelineTimer
from ..models import ExtractedDeal
from .amount import extract_amount_and_currency
from .brand import extract_brand_candidate
from .confidence import score_confidence
from .deliverables import extract_deliverables
from .status import classify_status

logger = structlog.get_logger(__name__)


def _validate_message(message: Any, max_length: int | None = None) -> str:
    """Return the trimmed message, or raise InvalidInputError."""
    if not isinstance(message, str):
        raise InvalidInputError(
            'message must be a string',
            context={'message_type': describe_type(message)},
        )

    text = message.strip()
    if max_length is not None and len(text) > max_length:
        raise InvalidInputError(
            'message exceeds maximum length',
            context={'length': len(text), 'max_length': max_length},
        )
    return text


def _validate_roster(known_brands: Any) -> tuple[str, ...]:
    """Return the roster as a tuple snapshot, or raise InvalidInputError."""
    if known_brands is None:
        return ()
    if isinstance(known_brands, (str, bytes)) or not isinstance(known_brands, Sequence):
        raise InvalidInputError(
            'known_brands must be a sequence of strings',
            context={'known_brands_type': describe_type(known_brands)},
        )
    for index, brand in enumerate(known_brands):
        if not isinstance(brand, str):
            raise InvalidInputError(
                'known_brands entries must be strings',
                context={'index': index, 'entry_type': describe_type(brand)},
            )
    return tuple(known_brands)


class DealParser:
    """
    Deterministic deal extractor bound to one brand roster.

    Useful when many messages are parsed against the same brand directory.
    Thresholds default to Config values.
    """

    def __init__(
        self,
        known_brands: Sequence[str] = (),
        max_message_length: int | None = None,
        brand_overlap_threshold: float | None = None,
        platform_lookback_chars: int | None = None,
    ):
        """
        Initialize the parser.

        Args:
            known_brands: Brand roster used before structural inference
            max_message_length: Optional guard on trimmed message length
                (default: Config.MAX_MESSAGE_LENGTH, unset means no limit)
            brand_overlap_threshold: Minimum token overlap for roster matches (default: 0.4)
            platform_lookback_chars: Platform keyword lookback window (default: 30)

        Raises:
            InvalidInputError: If known_brands is not a sequence of strings
        """
        self.max_message_length = (
            max_message_length
            if max_message_length is not None
            else Config.MAX_MESSAGE_LENGTH
        )
        self.brand_overlap_threshold = brand_overlap_threshold
        self.platform_lookback_chars = platform_lookback_chars
        self.known_brands = _validate_roster(known_brands)

    def parse(self, message: str) -> ExtractedDeal:
        """
        Parse one message against the bound roster.

        Raises:
            InvalidInputError: If message is not a string, or is longer than
                an explicitly configured max_message_length
        """
        text = _validate_message(message, self.max_message_length)
        roster = self.known_brands
        timer = PipelineTimer()

        with timer.stage('amount'):
            monetary = extract_amount_and_currency(text)
        with timer.stage('deliverables'):
            deliverables = extract_deliverables(
                text, lookback_chars=self.platform_lookback_chars
            )
        with timer.stage('brand'):
            brand_name = extract_brand_candidate(
                text, roster, overlap_threshold=self.brand_overlap_threshold
            )
        with timer.stage('status'):
            status = classify_status(text)

        confidence = score_confidence(
            text,
            brand_name=brand_name,
            total_value=monetary.amount,
            currency=monetary.currency,
            deliverables=deliverables,
        )

        try:
            deal = ExtractedDeal(
                brand_name=brand_name,
                total_value=monetary.amount,
                currency=monetary.currency,
                deliverables=deliverables,
                status=status,
                confidence=confidence,
            )
        except PydanticValidationError as exc:
            # Extractors only emit valid values; reaching here is a bug.
            raise ExtractionError(
                f"Extracted fields failed validation: {exc.error_count()} error(s)",
                context={'errors': exc.errors(include_url=False)},
            ) from exc

        logger.debug(
            'deal_parser.extract.complete',
            message_length=len(text),
            roster_size=len(roster),
            fields_found=deal.field_count(),
            deliverable_count=len(deliverables),
            status=status.value,
            confidence=confidence,
            **timer.summary(),
        )
        return deal


def extract_deal(message: str, known_brands: Sequence[str] | None = ()) -> ExtractedDeal:
    """
    Extract a draft deal from one creator message.

    Args:
        message: Raw creator text (trimmed internally)
        known_brands: Optional brand roster; without it only structural
            brand inference is used

    Returns:
        ExtractedDeal; empty text yields no fields, INBOUND, confidence 0.10

    Raises:
        InvalidInputError: If message is not a string, exceeds a configured
            DEAL_PARSER_MAX_MESSAGE_LENGTH, or known_brands is not a sequence
            of strings
    """
    return DealParser(known_brands=known_brands).parse(message)
