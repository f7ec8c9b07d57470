"""
Deal parsing pipeline: amount/currency, deliverable, brand and status
extraction, confidence scoring, and the parser that composes them.
"""

from .parser import DealParser, extract_deal

__all__ = [
    'DealParser',
    'extract_deal',
]
