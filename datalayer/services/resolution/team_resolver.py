"""
Team name resolution.

Maps any spelling of a team (bookmaker feed, news headline, user input) to
the canonical name API-Sports uses. Resolution runs four tiers, first hit
wins:

1. Exact alias lookup (case-insensitive, trimmed)
2. Substring containment against alias keys, in table order
3. Fuzzy similarity against the canonical names, accepted at >= threshold
4. Pass-through of the trimmed input

Resolution never fails. Every outcome is memoized per resolver instance,
keyed by ``(resolver key, lowercased raw name)``.
"""
import logging
from typing import Callable, Dict, List, Optional, Union

from datalayer.core.logging import get_logger
from datalayer.core.metrics import record_team_resolution
from datalayer.models.enums import Sport
from datalayer.services.resolution.aliases import canonical_names, get_aliases
from datalayer.services.resolution.name_normalizer import (
    normalize_key,
    similarity_score,
    strip_club_suffixes,
)

logger = get_logger(__name__)

Scorer = Callable[[str, str], int]
SportKey = Union[Sport, str]

DEFAULT_FUZZY_THRESHOLD = 70
DEFAULT_SAME_TEAM_THRESHOLD = 80


def resolver_key(sport: SportKey) -> str:
    """Alias table key for a Sport or a secondary-league key such as 'basketball_euroleague'."""
    return sport.value if isinstance(sport, Sport) else str(sport)


class TeamNameResolver:
    """
    Alias + fuzzy team name resolver with an unbounded per-instance memo.

    Args:
        threshold: Minimum similarity (0-100) for a fuzzy match
        same_team_threshold: Minimum similarity for ``is_same_team``
        scorer: Similarity function (defaults to ``similarity_score``)
        logger: Optional logger

    Usage:
        resolver = TeamNameResolver()
        resolver.resolve("Man Utd", Sport.SOCCER)       # 'Manchester United'
        resolver.resolve("cavs", Sport.BASKETBALL)      # 'Cleveland Cavaliers'
        resolver.resolve("Olympiacos", "basketball_euroleague")
    """

    def __init__(
        self,
        threshold: int = DEFAULT_FUZZY_THRESHOLD,
        same_team_threshold: int = DEFAULT_SAME_TEAM_THRESHOLD,
        scorer: Optional[Scorer] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.threshold = threshold
        self.same_team_threshold = same_team_threshold
        self.scorer = scorer or similarity_score
        self.logger = logger or globals()["logger"]
        self._memo: Dict[str, str] = {}
        self._hits = 0
        self._misses = 0

    def resolve(self, raw_name: str, sport: SportKey) -> str:
        """
        Resolve a raw team name to its canonical name.

        Args:
            raw_name: Name as it appears in some source
            sport: Sport or secondary-league resolver key

        Returns:
            Canonical name, or the trimmed input when nothing matches
        """
        key = resolver_key(sport)
        memo_key = f"{key}:{(raw_name or '').lower()}"

        if memo_key in self._memo:
            self._hits += 1
            record_team_resolution(key, "memo")
            return self._memo[memo_key]

        self._misses += 1
        resolved, tier = self._resolve_uncached(raw_name or "", key)
        self._memo[memo_key] = resolved
        record_team_resolution(key, tier)
        self.logger.debug(f"Team resolution ({tier}): '{raw_name}' -> '{resolved}' [{key}]")
        return resolved

    def _resolve_uncached(self, raw_name: str, key: str) -> tuple:
        normalized = normalize_key(raw_name)
        aliases = get_aliases(key)

        # 1. Exact alias
        if normalized in aliases:
            return aliases[normalized], "exact"

        # 2. Containment either way, first key in table order
        if normalized:
            for alias, canonical in aliases.items():
                if alias in normalized or normalized in alias:
                    return canonical, "partial"

        # 3. Fuzzy against canonical names; ties keep the earlier name
        best_name = ""
        best_score = 0
        for candidate in canonical_names(key):
            score = self.scorer(normalized, candidate.lower())
            if score > best_score:
                best_score = score
                best_name = candidate

        if best_name and best_score >= self.threshold:
            return best_name, "fuzzy"

        # 4. Pass-through
        return raw_name.strip(), "passthrough"

    def get_search_variations(self, raw_name: str, sport: SportKey) -> List[str]:
        """
        Candidate strings to try against a provider's own team list.

        Order: canonical name, raw input, input without club suffixes, then
        the last and first words of the canonical name. Duplicates removed.

        Examples:
            "Man Utd" (soccer) -> ['Manchester United', 'Man Utd', 'United', 'Manchester']
        """
        resolved = self.resolve(raw_name, sport)
        variations = [resolved, raw_name]

        without_suffix = strip_club_suffixes(raw_name)
        if without_suffix and without_suffix != raw_name:
            variations.append(without_suffix)

        words = resolved.split()
        if len(words) > 1:
            variations.append(words[-1])
            variations.append(words[0])

        return [v for v in dict.fromkeys(variations) if v]

    def is_same_team(self, name1: str, name2: str, sport: SportKey) -> bool:
        """True when both names resolve to the same team or are near-identical."""
        resolved1 = self.resolve(name1, sport)
        resolved2 = self.resolve(name2, sport)

        if resolved1.lower() == resolved2.lower():
            return True
        return self.scorer(resolved1.lower(), resolved2.lower()) >= self.same_team_threshold

    def clear_cache(self) -> None:
        """Drop every memoized resolution."""
        self._memo.clear()
        self._hits = 0
        self._misses = 0

    def get_cache_stats(self) -> Dict:
        """Memo size, hit/miss counters and memo keys."""
        return {
            "size": len(self._memo),
            "hits": self._hits,
            "misses": self._misses,
            "entries": list(self._memo.keys()),
        }
