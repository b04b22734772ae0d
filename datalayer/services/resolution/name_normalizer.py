"""Name normalization and similarity scoring for team name matching.

Handles common variations across sources:
- Case and surrounding whitespace: "  LA Lakers " -> "la lakers"
- Accents: "Atlético Madrid" -> "atletico madrid"
- Club suffix tokens: "Arsenal FC" -> "Arsenal"
"""
import math
import re
import unicodedata

from rapidfuzz.distance import Levenshtein

# Club designators dropped when building search variations
CLUB_SUFFIX_PATTERN = re.compile(r'\b(fc|cf|afc|sc)\b', re.IGNORECASE)


def normalize_key(name: str) -> str:
    """
    Lookup key for alias tables: lowercase and trimmed.

    Examples:
        >>> normalize_key("  Boston Celtics ")
        'boston celtics'
    """
    if not name:
        return ""
    return name.lower().strip()


def fold(name: str) -> str:
    """
    Comparison form for provider team lists: accents removed, lowercase,
    whitespace collapsed.

    Examples:
        >>> fold("Atlético  Madrid")
        'atletico madrid'
    """
    if not name:
        return ""
    return ' '.join(_normalize_unicode(name).lower().split())


def _normalize_unicode(name: str) -> str:
    """
    Remove accents and diacritics from unicode characters.

    Converts 'é' -> 'e', 'ü' -> 'u', 'ç' -> 'c', etc.
    """
    # Normalize to NFD form, then remove combining characters
    normalized = unicodedata.normalize('NFD', name)
    return ''.join(
        c for c in normalized
        if unicodedata.category(c) != 'Mn'
    )


def strip_club_suffixes(name: str) -> str:
    """
    Remove whole-word club designators (FC, CF, AFC, SC).

    Examples:
        >>> strip_club_suffixes("Arsenal FC")
        'Arsenal'
        >>> strip_club_suffixes("AFC Bournemouth")
        'Bournemouth'
        >>> strip_club_suffixes("Scunthorpe")
        'Scunthorpe'
    """
    return ' '.join(CLUB_SUFFIX_PATTERN.sub(' ', name).split())


def similarity_score(a: str, b: str) -> int:
    """
    Normalized edit-distance similarity on a 0-100 scale.

    Computed case-insensitively as round-half-up of
    ``(1 - levenshtein(a, b) / max(len(a), len(b))) * 100``. Two empty
    strings score 100.

    Examples:
        >>> similarity_score("Boston Celtics", "boston celtics")
        100
        >>> similarity_score("Lakers", "Bakers")
        83
    """
    a = (a or "").lower()
    b = (b or "").lower()
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 100
    distance = Levenshtein.distance(a, b)
    return int(math.floor((1 - distance / max_len) * 100 + 0.5))
