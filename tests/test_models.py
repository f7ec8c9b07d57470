"""
Tests for the ExtractedDeal / Deliverable models.
"""

import json

import pytest
from pydantic import ValidationError

from deal_parser.models import (
    ContentType,
    Currency,
    DealStatus,
    Deliverable,
    ExtractedDeal,
    Platform,
)


class TestDeliverable:
    """Test Deliverable validation."""

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            Deliverable(platform=Platform.INSTAGRAM, type=ContentType.REEL, quantity=0)

    def test_accepts_enum_names(self):
        item = Deliverable(platform='YOUTUBE', type='SHORT', quantity=2)

        assert item.platform == Platform.YOUTUBE
        assert item.type == ContentType.SHORT

    def test_rejects_unknown_platform(self):
        with pytest.raises(ValidationError):
            Deliverable(platform='SNAPCHAT', type='STORY', quantity=1)


class TestExtractedDeal:
    """Test ExtractedDeal validation and serialization."""

    def test_defaults(self):
        deal = ExtractedDeal(confidence=0.1)

        assert deal.brand_name is None
        assert deal.total_value is None
        assert deal.currency is None
        assert deal.deliverables == ()
        assert deal.status == DealStatus.INBOUND
        assert deal.field_count() == 0

    @pytest.mark.parametrize('value', [0, -5, float('inf'), float('nan')])
    def test_total_value_must_be_positive_and_finite(self, value):
        with pytest.raises(ValidationError):
            ExtractedDeal(total_value=value, confidence=0.5)

    @pytest.mark.parametrize('confidence', [-0.01, 1.01])
    def test_confidence_bounds(self, confidence):
        with pytest.raises(ValidationError):
            ExtractedDeal(confidence=confidence)

    def test_field_count(self):
        deal = ExtractedDeal(
            brand_name='Nike',
            total_value=1500,
            currency=Currency.USD,
            deliverables=[
                Deliverable(platform=Platform.INSTAGRAM, type=ContentType.REEL, quantity=2)
            ],
            confidence=0.9,
        )

        assert deal.field_count() == 4

    def test_json_shape_matches_llm_contract(self):
        """Test the serialized keys and enum values used by downstream callers."""
        deal = ExtractedDeal(
            brand_name='Nike',
            total_value=1500,
            currency=Currency.USD,
            deliverables=[
                Deliverable(platform=Platform.INSTAGRAM, type=ContentType.REEL, quantity=2)
            ],
            status=DealStatus.NEGOTIATING,
            confidence=0.9,
        )

        payload = json.loads(deal.model_dump_json())

        assert payload == {
            'brand_name': 'Nike',
            'total_value': 1500.0,
            'currency': 'USD',
            'deliverables': [{'platform': 'INSTAGRAM', 'type': 'REEL', 'quantity': 2}],
            'status': 'NEGOTIATING',
            'confidence': 0.9,
        }

    def test_round_trips_from_llm_payload(self):
        """Test that an equivalent payload from the LLM path validates into the same model."""
        payload = {
            'brand_name': 'Apple',
            'total_value': None,
            'currency': None,
            'deliverables': [{'platform': 'YOUTUBE', 'type': 'VIDEO', 'quantity': 1}],
            'status': 'INBOUND',
            'confidence': 0.5,
        }

        deal = ExtractedDeal.model_validate(payload)

        assert deal.deliverables[0].platform == Platform.YOUTUBE
        assert deal.field_count() == 2
