"""
Brand resolution against the creator's brand roster.

Roster matching strategies (highest score wins across the whole roster):
- Substring: normalized brand appears in normalized text.
  Score = len(brand) / len(text) + 0.5, so longer names beat shorter ones.
- Token overlap: Jaccard overlap between brand tokens and the text's
  non-stop-word tokens. Only accepted at >= the overlap threshold (0.4).

When no roster brand matches, the brand is inferred from message structure
("Brand: X", "X wants ...", "from X", "this is Y from X", "Hey X,").
"""

import re
from collections.abc import Sequence

import structlog

from ..config import Config

logger = structlog.get_logger(__name__)

SUBSTRING_MATCH_BONUS = 0.5

# Tokens that never identify a brand on their own.
STOP_WORDS: frozenset[str] = frozenset(
    {
        'i', 'me', 'my', 'we', 'our', 'you', 'your', 'the', 'a', 'an',
        'and', 'or', 'but', 'for', 'with', 'from', 'to', 'in', 'on', 'at',
        'of', 'is', 'are', 'was', 'were', 'be', 'been', 'has', 'have', 'had',
        'do', 'does', 'did', 'will', 'would', 'can', 'could', 'should',
        'want', 'wants', 'need', 'needs', 'like', 'get', 'got', 'make',
        'this', 'that', 'it', 'its', 'they', 'them', 'their',
        'someone', 'somebody',
        'deal', 'deals', 'brand', 'campaign', 'collab', 'collaboration',
        'payment', 'paid', 'pay', 'rate', 'price', 'budget',
        'reel', 'reels', 'post', 'posts', 'story', 'stories', 'video', 'videos',
        'short', 'shorts', 'instagram', 'youtube', 'tiktok', 'ig', 'yt', 'tt',
        'insta', 'hey', 'hi', 'hello', 'thanks', 'thank', 'please',
    }
)

_NON_ALNUM = re.compile(r'[^a-z0-9\s]')
_WHITESPACE = re.compile(r'\s+')

# Structural fallbacks, tried in order; group 1 is the brand candidate.
_NAME_TOKEN = r"[a-z][a-z0-9&.'\-]*"
BRAND_INFERENCE_PATTERNS: tuple[re.Pattern, ...] = (
    # "Brand: Acme Co wants ..." / "client - Acme"
    re.compile(
        rf'(?:^|\b)(?:brand|client)\s*[:\-]\s*({_NAME_TOKEN}(?:\s+{_NAME_TOKEN}){{0,4}}?)'
        r'(?=\s+(?:wants?|needs?|asked|reached|campaign|deal|collab|for|to|on)\b|[,.!?]|$)',
        re.IGNORECASE,
    ),
    # "Nike wants 2 reels"
    re.compile(
        rf'^({_NAME_TOKEN}(?:\s+{_NAME_TOKEN}){{0,3}}?)'
        r'(?=\s+(?:wants?|needs?|asked|reached|campaign|deal|collab)\b)',
        re.IGNORECASE,
    ),
    # "message from North Face for 1 reel"
    re.compile(
        rf'(?:^|\b)(?:from)\s+({_NAME_TOKEN}(?:\s+{_NAME_TOKEN}){{0,3}}?)'
        r'(?=\s+(?:wants?|needs?|asked|reached|campaign|deal|collab|for|to|on)\b|[,.!?]|$)',
        re.IGNORECASE,
    ),
    # "this is Maya from Glow Labs team"
    re.compile(
        r"\bthis is\s+[a-z][a-z0-9.'\-]*(?:\s+[a-z][a-z0-9.'\-]*){0,2}\s+from\s+"
        rf'({_NAME_TOKEN}(?:\s+{_NAME_TOKEN}){{0,4}}?)'
        r'(?=\s+(?:team|marketing|partnerships|wants?|needs?|for|to|on)\b|[,.!?]|$)',
        re.IGNORECASE,
    ),
    # "Hey Nike team, ..."
    re.compile(
        r"^(?:hey|hi|hello)\s+([a-z0-9&.'\-\s]{2,60}?)(?:[,.!?]\s|$)",
        re.IGNORECASE,
    ),
)

_EDGE_PUNCTUATION = re.compile(r'''^[\s"'`]+|[\s"'`.,!?]+$''')
_ORG_SUFFIX = re.compile(r'\b(?:marketing|partnerships?|team|agency)\b.*$', re.IGNORECASE)


def normalize_name(name: str) -> str:
    """Lowercase, punctuation to spaces, whitespace collapsed."""
    lowered = name.strip().lower()
    return _WHITESPACE.sub(' ', _NON_ALNUM.sub(' ', lowered)).strip()


def tokenize(name: str) -> set[str]:
    return {token for token in normalize_name(name).split(' ') if token}


def token_overlap(a: set[str], b: set[str]) -> float:
    """Jaccard overlap (|a & b| / |a | b|); zero when either side is empty."""
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def match_known_brand(
    text: str,
    known_brands: Sequence[str],
    overlap_threshold: float | None = None,
) -> str | None:
    """
    Best roster brand for the text, in its roster spelling.

    Args:
        text: Trimmed message text
        known_brands: Roster of brand names
        overlap_threshold: Minimum Jaccard score for token-overlap matches

    Returns:
        Matching roster entry, or None
    """
    if overlap_threshold is None:
        overlap_threshold = Config.BRAND_OVERLAP_THRESHOLD

    normalized_text = normalize_name(text)
    if not normalized_text:
        return None

    text_tokens = {t for t in tokenize(text) if t not in STOP_WORDS}
    best_brand: str | None = None
    best_score = 0.0

    for brand_name in known_brands:
        normalized_brand = normalize_name(brand_name)
        if not normalized_brand:
            continue

        if normalized_brand in normalized_text:
            score = len(normalized_brand) / len(normalized_text) + SUBSTRING_MATCH_BONUS
            if score > best_score:
                best_score = score
                best_brand = brand_name
            continue

        overlap = token_overlap(tokenize(brand_name), text_tokens)
        if overlap > best_score and overlap >= overlap_threshold:
            best_score = overlap
            best_brand = brand_name

    if best_brand is not None:
        logger.debug('brand.roster_match', score=round(best_score, 3))
    return best_brand


def clean_inferred_brand(value: str) -> str | None:
    """
    Tidy a structurally inferred brand candidate.

    Strips quotes and trailing punctuation, drops a trailing
    "marketing"/"partnerships"/"team"/"agency" suffix, and rejects
    candidates made only of stop words or bare numbers.
    """
    cleaned = _EDGE_PUNCTUATION.sub('', value.strip())
    cleaned = _ORG_SUFFIX.sub('', cleaned, count=1)
    cleaned = _WHITESPACE.sub(' ', cleaned).strip()
    if not cleaned:
        return None

    tokens = [t for t in normalize_name(cleaned).split(' ') if t]
    if not tokens or all(t in STOP_WORDS or t.isdecimal() for t in tokens):
        return None

    return cleaned


def infer_brand_from_text(text: str) -> str | None:
    """Brand named by message structure alone, or None."""
    for pattern in BRAND_INFERENCE_PATTERNS:
        match = pattern.search(text)
        if match is None or not match.group(1):
            continue
        candidate = clean_inferred_brand(match.group(1))
        if candidate:
            return candidate
    return None


def extract_brand_candidate(
    text: str,
    known_brands: Sequence[str] = (),
    overlap_threshold: float | None = None,
) -> str | None:
    """Roster match first, structural inference second."""
    brand = match_known_brand(text, known_brands, overlap_threshold=overlap_threshold)
    if brand is not None:
        return brand
    return infer_brand_from_text(text)
