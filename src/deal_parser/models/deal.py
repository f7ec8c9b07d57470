"""
Draft deal models produced by the message parser.

The JSON shape (brand_name, total_value, currency, deliverables, status,
confidence) is shared with the LLM-backed extractor used elsewhere in the
product, so callers can treat results from either path interchangeably.
Enum members serialize to their upper-case names.

Instances are frozen: each parse builds a fresh result and nothing mutates
it afterwards.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Currency(str, Enum):
    """Currencies the parser can infer from a message."""

    USD = 'USD'
    INR = 'INR'


class Platform(str, Enum):
    """Social platform a deliverable is published on."""

    INSTAGRAM = 'INSTAGRAM'
    YOUTUBE = 'YOUTUBE'
    TIKTOK = 'TIKTOK'


class ContentType(str, Enum):
    """Kind of content a deliverable is."""

    REEL = 'REEL'
    POST = 'POST'
    STORY = 'STORY'
    SHORT = 'SHORT'
    VIDEO = 'VIDEO'


class DealStatus(str, Enum):
    """Negotiation stage inferred from the message wording."""

    INBOUND = 'INBOUND'
    NEGOTIATING = 'NEGOTIATING'
    AGREED = 'AGREED'


class Deliverable(BaseModel):
    """One unit of contracted content, e.g. "2 Instagram reels"."""

    model_config = {'frozen': True}

    platform: Platform
    type: ContentType
    quantity: int = Field(..., ge=1, description='Number of pieces of content')


class ExtractedDeal(BaseModel):
    """
    Draft deal extracted from a single creator message.

    Best-effort: every optional field is omitted rather than guessed when
    the message does not support it. A human reviews the draft before it
    becomes a deal record.
    """

    model_config = {'frozen': True}

    brand_name: str | None = Field(
        default=None, min_length=1, description='Best-guess brand name'
    )
    total_value: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description='Monetary amount (currency-agnostic)',
    )
    currency: Currency | None = Field(default=None, description='Inferred currency')
    deliverables: tuple[Deliverable, ...] = Field(
        default_factory=tuple,
        description='One entry per (platform, type), quantities merged',
    )
    status: DealStatus = Field(default=DealStatus.INBOUND, description='Negotiation status')
    confidence: float = Field(
        ..., ge=0.0, le=1.0, description='Extraction confidence (0.0-1.0)'
    )

    def field_count(self) -> int:
        """Number of populated independent fields (brand, value, currency, deliverables)."""
        return sum(
            [
                self.brand_name is not None,
                self.total_value is not None,
                self.currency is not None,
                len(self.deliverables) > 0,
            ]
        )
