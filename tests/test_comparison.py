"""Tests for has_matches and friends."""

from __future__ import annotations

from arrutils.comparison import has_all_matches, has_any_matches, has_matches


class TestHasMatches:
    def test_all_match(self) -> None:
        assert has_matches(["a", "b"], ["b", "c", "a"]) is True

    def test_not_all_match(self) -> None:
        assert has_matches(["a", "d"], ["b", "c", "a"]) is False

    def test_any_match(self) -> None:
        assert has_matches(["a", "d"], ["b", "c", "a"], match_all=False) is True
        assert has_matches(["x"], ["b"], match_all=False) is False

    def test_duplicates_in_first(self) -> None:
        assert has_matches(["a", "a"], ["a"]) is True

    def test_empty_first(self) -> None:
        assert has_all_matches([], ["a"]) is True
        assert has_any_matches([], ["a"]) is False

    def test_mapping_values(self) -> None:
        assert has_all_matches({"k": "a"}, {"other": "a"}) is True


class TestShortcuts:
    def test_has_all_matches(self) -> None:
        assert has_all_matches([1, 2], [2, 1]) is True
        assert has_all_matches([1, 3], [2, 1]) is False

    def test_has_any_matches(self) -> None:
        assert has_any_matches([1, 3], [2, 1]) is True
        assert has_any_matches([4], [2, 1]) is False
