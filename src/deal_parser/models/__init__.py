"""
Data models for the deal message parser.
"""

from .deal import (
    ContentType,
    Currency,
    DealStatus,
    Deliverable,
    ExtractedDeal,
    Platform,
)

__all__ = [
    'ContentType',
    'Currency',
    'DealStatus',
    'Deliverable',
    'ExtractedDeal',
    'Platform',
]
