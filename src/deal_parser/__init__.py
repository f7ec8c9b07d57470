"""
Deal Parser

Deterministic extraction of draft brand deals from free-form creator
messages ("Nike wants 2 reels for $1500"): brand, amount, currency,
deliverables, negotiation status, and a confidence score. Pure and
stateless; no network or persistence.
"""

__version__ = '0.1.0'

from .config import Config, config
from .errors import (
    DealParserError,
    InputError,
    InvalidInputError,
    ExtractionError,
)
from .models import (
    ContentType,
    Currency,
    DealStatus,
    Deliverable,
    ExtractedDeal,
    Platform,
)
from .pipeline import DealParser, extract_deal

__all__ = [
    # Version
    '__version__',
    # Config
    'Config',
    'config',
    # Errors
    'DealParserError',
    'InputError',
    'InvalidInputError',
    'ExtractionError',
    # Models
    'ContentType',
    'Currency',
    'DealStatus',
    'Deliverable',
    'ExtractedDeal',
    'Platform',
    # Parser
    'DealParser',
    'extract_deal',
]
