"""
Deliverable extraction: "2 reels", "a YouTube video", "IG story", "3x shorts".

Each match yields (platform, content type, quantity). Platform resolution:
1. platform keyword inside the match ("3 youtube videos")
2. platform keyword shortly before the match ("on Instagram: 2 reels")
3. default platform for the content type
Repeated (platform, type) pairs are merged into the first occurrence.
"""

import re

from ..config import Config
from ..models import ContentType, Deliverable, Platform

CONTENT_TYPE_MAP: dict[str, ContentType] = {
    'reel': ContentType.REEL,
    'reels': ContentType.REEL,
    'post': ContentType.POST,
    'posts': ContentType.POST,
    'story': ContentType.STORY,
    'stories': ContentType.STORY,
    'short': ContentType.SHORT,
    'shorts': ContentType.SHORT,
    'video': ContentType.VIDEO,
    'videos': ContentType.VIDEO,
}

# Iteration order is the lookback priority.
PLATFORM_KEYWORDS: dict[str, Platform] = {
    'instagram': Platform.INSTAGRAM,
    'ig': Platform.INSTAGRAM,
    'insta': Platform.INSTAGRAM,
    'youtube': Platform.YOUTUBE,
    'yt': Platform.YOUTUBE,
    'tiktok': Platform.TIKTOK,
    'tik tok': Platform.TIKTOK,
    'tt': Platform.TIKTOK,
}

DEFAULT_PLATFORM: dict[ContentType, Platform] = {
    ContentType.REEL: Platform.INSTAGRAM,
    ContentType.POST: Platform.INSTAGRAM,
    ContentType.STORY: Platform.INSTAGRAM,
    ContentType.SHORT: Platform.YOUTUBE,
    ContentType.VIDEO: Platform.YOUTUBE,
}

WORD_TO_NUMBER: dict[str, int] = {
    'a': 1,
    'an': 1,
    'one': 1,
    'two': 2,
    'three': 3,
    'four': 4,
    'five': 5,
    'six': 6,
    'seven': 7,
    'eight': 8,
    'nine': 9,
    'ten': 10,
}

# Any number directly before a content type is taken as its quantity, so
# "$1500 reel" reads as 1500 reels.
DELIVERABLE_PATTERN = re.compile(
    r'(?:(?P<quantity>(?<!\d)\d+\s*x?|a|an|one|two|three|four|five|six|seven|eight|nine|ten)\s+)?'
    r'(?:(?P<platform>instagram|ig|insta|youtube|yt|tiktok|tik\s*tok|tt)\s+)?'
    r'(?P<type>reels?|posts?|stor(?:y|ies)|shorts?|videos?)\b',
    re.IGNORECASE,
)

_TRAILING_X = re.compile(r'\s*x$')
_WHITESPACE = re.compile(r'\s+')


def parse_quantity(raw: str | None) -> int:
    """Quantity from "2", "3x", "two" or "a"; a missing token means one."""
    if not raw:
        return 1
    normalized = _TRAILING_X.sub('', raw.strip().lower())
    if normalized.isdecimal():
        return int(normalized)
    return WORD_TO_NUMBER.get(normalized, 1)


def infer_platform(
    explicit_platform: str | None,
    content_type: ContentType,
    text: str,
    match_start: int,
    lookback_chars: int | None = None,
) -> Platform:
    """
    Resolve the platform for one deliverable match.

    Args:
        explicit_platform: Platform keyword captured inside the match, if any
        content_type: Content type of the match
        text: Full message text
        match_start: Offset where the match begins
        lookback_chars: Characters before the match to scan for a platform keyword

    Returns:
        Resolved Platform (never None)
    """
    if explicit_platform:
        mapped = PLATFORM_KEYWORDS.get(_WHITESPACE.sub('', explicit_platform.lower()))
        if mapped is not None:
            return mapped

    if lookback_chars is None:
        lookback_chars = Config.PLATFORM_LOOKBACK_CHARS
    context_before = text[max(0, match_start - lookback_chars):match_start].lower()

    for keyword, platform in PLATFORM_KEYWORDS.items():
        if keyword in context_before:
            return platform

    return DEFAULT_PLATFORM[content_type]


def extract_deliverables(text: str, lookback_chars: int | None = None) -> list[Deliverable]:
    """
    Find all deliverables mentioned in the text, merged per (platform, type).

    Args:
        text: Trimmed message text
        lookback_chars: Override for the platform lookback window

    Returns:
        Deliverables in order of first mention
    """
    quantities: dict[tuple[Platform, ContentType], int] = {}

    for match in DELIVERABLE_PATTERN.finditer(text):
        content_type = CONTENT_TYPE_MAP.get(match.group('type').lower())
        if content_type is None:
            continue

        quantity = parse_quantity(match.group('quantity'))
        if quantity <= 0:
            continue

        platform = infer_platform(
            match.group('platform'),
            content_type,
            text,
            match.start(),
            lookback_chars=lookback_chars,
        )
        key = (platform, content_type)
        # dicts keep insertion order, so the first mention fixes the position
        quantities[key] = quantities.get(key, 0) + quantity

    return [
        Deliverable(platform=platform, type=content_type, quantity=quantity)
        for (platform, content_type), quantity in quantities.items()
    ]
