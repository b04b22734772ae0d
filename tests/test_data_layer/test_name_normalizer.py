"""Unit tests for team name normalization and similarity scoring.

Test Strategy:
1. Test alias lookup keys (lowercase, trimmed)
2. Test folding for provider list comparison (accents, whitespace)
3. Test club suffix removal (FC, CF, AFC, SC as whole words only)
4. Test the 0-100 similarity score, including rounding and empty inputs
"""
from datalayer.services.resolution.name_normalizer import (
    fold,
    normalize_key,
    similarity_score,
    strip_club_suffixes,
)


class TestNameNormalizer:
    """Test suite for name normalization helpers."""

    # Keys & Folding
    # ─────────────────────────────────────────────────────────────

    def test_normalize_key_lowercases_and_trims(self):
        """Should produce the alias table key form."""
        assert normalize_key("  Boston Celtics ") == "boston celtics"
        assert normalize_key("MAN UTD") == "man utd"

    def test_normalize_key_handles_empty(self):
        """Should return an empty key for empty or None input."""
        assert normalize_key("") == ""
        assert normalize_key(None) == ""

    def test_fold_removes_accents_and_collapses_whitespace(self):
        """Should strip diacritics and collapse inner whitespace."""
        assert fold("Atlético   Madrid") == "atletico madrid"
        assert fold("  Fenerbahçe Beko ") == "fenerbahce beko"
        assert fold("Bayern München") == "bayern munchen"

    # Club Suffixes
    # ─────────────────────────────────────────────────────────────

    def test_strips_trailing_and_leading_designators(self):
        """Should remove FC/AFC whether before or after the name."""
        assert strip_club_suffixes("Arsenal FC") == "Arsenal"
        assert strip_club_suffixes("AFC Bournemouth") == "Bournemouth"
        assert strip_club_suffixes("Valencia CF") == "Valencia"

    def test_keeps_designator_letters_inside_words(self):
        """Should only remove whole-word designators."""
        assert strip_club_suffixes("Scunthorpe") == "Scunthorpe"
        assert strip_club_suffixes("Fcbarcelona") == "Fcbarcelona"

    # Similarity
    # ─────────────────────────────────────────────────────────────

    def test_identical_names_score_100_case_insensitively(self):
        """Should ignore case."""
        assert similarity_score("Boston Celtics", "boston celtics") == 100

    def test_one_substitution_in_six_characters(self):
        """Should round (1 - 1/6) * 100 = 83.33 down to 83."""
        assert similarity_score("Lakers", "Bakers") == 83

    def test_rounds_half_up(self):
        """Should round 87.5 up to 88 (one edit in eight characters)."""
        assert similarity_score("Warriors", "Warriorz") == 88

    def test_empty_strings(self):
        """Should score two empty strings as identical and one empty as 0."""
        assert similarity_score("", "") == 100
        assert similarity_score("", "Heat") == 0

    def test_completely_different_names_score_low(self):
        """Should score unrelated names well below the fuzzy threshold."""
        assert similarity_score("Arsenal", "Quidditch Falcons") < 50
