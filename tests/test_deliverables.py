"""
Tests for deliverable extraction.

Tests cover:
- Quantities: digits, "3x", number words, implicit one
- Platform resolution: explicit keyword, lookback window, type default
- Merging repeated (platform, type) pairs in first-mention order

Run with: pytest tests/test_deliverables.py -v
"""

import time

import pytest

from deal_parser.models import ContentType, Deliverable, Platform
from deal_parser.pipeline.deliverables import (
    extract_deliverables,
    infer_platform,
    parse_quantity,
)


def d(platform: Platform, content_type: ContentType, quantity: int) -> Deliverable:
    return Deliverable(platform=platform, type=content_type, quantity=quantity)


class TestParseQuantity:
    """Test quantity token resolution."""

    @pytest.mark.parametrize(
        'raw, expected',
        [
            (None, 1),
            ('', 1),
            ('2', 2),
            ('3x', 3),
            ('3 x', 3),
            ('12', 12),
            ('a', 1),
            ('An', 1),
            ('two', 2),
            ('Ten', 10),
            ('0', 0),
        ],
    )
    def test_quantity_tokens(self, raw, expected):
        assert parse_quantity(raw) == expected


class TestInferPlatform:
    """Test platform priority rules."""

    def test_explicit_keyword_wins(self):
        text = 'instagram stuff, 2 yt shorts'
        assert infer_platform('yt', ContentType.SHORT, text, text.index('2')) == Platform.YOUTUBE

    def test_tik_tok_with_space(self):
        assert infer_platform('Tik Tok', ContentType.VIDEO, '', 0) == Platform.TIKTOK

    def test_lookback_keyword(self):
        text = 'For Instagram: 2 videos'
        assert infer_platform(None, ContentType.VIDEO, text, text.index('2')) == Platform.INSTAGRAM

    def test_keyword_outside_lookback_is_ignored(self):
        text = 'On TikTok, and then after a long, long pause: 2 videos'
        start = text.index('2')
        assert start > 30
        assert infer_platform(None, ContentType.VIDEO, text, start) == Platform.YOUTUBE

    def test_custom_lookback(self):
        text = 'On TikTok, and then after a long, long pause: 2 videos'
        start = text.index('2')
        assert infer_platform(None, ContentType.VIDEO, text, start, lookback_chars=60) == Platform.TIKTOK

    @pytest.mark.parametrize(
        'content_type, expected',
        [
            (ContentType.REEL, Platform.INSTAGRAM),
            (ContentType.POST, Platform.INSTAGRAM),
            (ContentType.STORY, Platform.INSTAGRAM),
            (ContentType.SHORT, Platform.YOUTUBE),
            (ContentType.VIDEO, Platform.YOUTUBE),
        ],
    )
    def test_type_defaults(self, content_type, expected):
        assert infer_platform(None, content_type, '', 0) == expected


class TestExtractDeliverables:
    """Test end-to-end deliverable extraction."""

    def test_digit_quantity(self):
        assert extract_deliverables('Nike wants 2 reels') == [
            d(Platform.INSTAGRAM, ContentType.REEL, 2)
        ]

    def test_posts(self):
        assert extract_deliverables('3 posts for the brand') == [
            d(Platform.INSTAGRAM, ContentType.POST, 3)
        ]

    def test_story_and_reel(self):
        assert extract_deliverables('Need a story and a reel') == [
            d(Platform.INSTAGRAM, ContentType.STORY, 1),
            d(Platform.INSTAGRAM, ContentType.REEL, 1),
        ]

    def test_youtube_video(self):
        assert extract_deliverables('1 youtube video') == [
            d(Platform.YOUTUBE, ContentType.VIDEO, 1)
        ]

    def test_tiktok_video(self):
        assert extract_deliverables('tiktok video collab') == [
            d(Platform.TIKTOK, ContentType.VIDEO, 1)
        ]

    def test_shorts_default_to_youtube(self):
        assert extract_deliverables('2 shorts for the campaign') == [
            d(Platform.YOUTUBE, ContentType.SHORT, 2)
        ]

    def test_times_suffix(self):
        assert extract_deliverables('3x reels') == [
            d(Platform.INSTAGRAM, ContentType.REEL, 3)
        ]

    def test_number_words(self):
        assert extract_deliverables('two reels and three stories') == [
            d(Platform.INSTAGRAM, ContentType.REEL, 2),
            d(Platform.INSTAGRAM, ContentType.STORY, 3),
        ]

    def test_shorthand_platforms(self):
        assert extract_deliverables('IG reel + YT short + TT story') == [
            d(Platform.INSTAGRAM, ContentType.REEL, 1),
            d(Platform.YOUTUBE, ContentType.SHORT, 1),
            d(Platform.TIKTOK, ContentType.STORY, 1),
        ]

    def test_merges_repeated_pairs(self):
        """Test that repeated (platform, type) pairs sum into the first entry."""
        assert extract_deliverables('2 reels and 1 more reel on Instagram') == [
            d(Platform.INSTAGRAM, ContentType.REEL, 3)
        ]

    def test_merge_keeps_first_mention_order(self):
        result = extract_deliverables('1 reel, 2 posts, then 2 reels more')

        assert result == [
            d(Platform.INSTAGRAM, ContentType.REEL, 3),
            d(Platform.INSTAGRAM, ContentType.POST, 2),
        ]

    def test_same_type_on_two_platforms_stays_separate(self):
        result = extract_deliverables('1 youtube video and 2 tiktok videos')

        assert result == [
            d(Platform.YOUTUBE, ContentType.VIDEO, 1),
            d(Platform.TIKTOK, ContentType.VIDEO, 2),
        ]

    def test_zero_quantity_is_skipped(self):
        assert extract_deliverables('0 reels please') == []

    def test_no_deliverables(self):
        assert extract_deliverables('Hey how are you?') == []

    def test_invariants_hold(self):
        """Test quantity >= 1 and unique (platform, type) pairs on a noisy message."""
        result = extract_deliverables(
            'IG: 2 reels, 3 stories, a reel, YT: 2 shorts, 1 short, one video, a tiktok video'
        )

        pairs = [(item.platform, item.type) for item in result]
        assert len(pairs) == len(set(pairs))
        assert all(item.quantity >= 1 for item in result)

    def test_amount_digits_read_as_quantity(self):
        """Test that a number right before a type is its quantity, even a price."""
        assert extract_deliverables('$1500 reel next monday') == [
            d(Platform.INSTAGRAM, ContentType.REEL, 1500)
        ]

    def test_long_digit_run_is_fast(self):
        start = time.perf_counter()
        extract_deliverables('1' * 5000 + ' and a reel')

        assert time.perf_counter() - start < 1.0
