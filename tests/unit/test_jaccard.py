"""Jaccard 유사도 유닛 테스트"""
import pytest

from catalog_search.utils.text.jaccard import JaccardResult, jaccard, jaccard_detailed


class TestJaccard:
    """점수 계산"""

    def test_arrays(self):
        assert jaccard([1, 2, 3], [2, 3, 4]) == pytest.approx(2 / 4)

    def test_both_empty_is_zero(self):
        """공집합끼리는 0 (1이 아님)"""
        assert jaccard([], []) == 0
        assert jaccard("", "") == 0
        assert jaccard(None, None) == 0

    def test_one_empty(self):
        assert jaccard(["gaming"], []) == 0

    @pytest.mark.parametrize("tokens", [
        ["gaming"],
        ["gaming", "computer", "laptop"],
        "wireless ergonomic mouse",
    ])
    def test_reflexive(self, tokens):
        assert jaccard(tokens, tokens) == 1

    @pytest.mark.parametrize("a,b", [
        (["gaming", "computer"], ["gaming", "computer", "laptop", "portable"]),
        ("the quick brown fox", "quick brown dog"),
        (["Red", "shoes"], "red running shoes"),
        ([], ["x"]),
    ])
    def test_symmetric(self, a, b):
        assert jaccard(a, b) == jaccard(b, a)

    def test_free_text(self):
        # {the, quick, brown, fox} vs {quick, brown, dog}
        assert jaccard("the quick brown fox", "quick brown dog") == pytest.approx(2 / 5)

    def test_case_insensitive(self):
        assert jaccard(["Gaming", "COMPUTER"], "gaming computer") == 1

    def test_duplicates_collapsed(self):
        assert jaccard(["a", "a", "b"], ["a"]) == pytest.approx(1 / 2)

    def test_score_bounds(self):
        score = jaccard("alpha beta gamma", "beta delta")
        assert 0 <= score <= 1


class TestJaccardDetailed:
    """교집합/합집합 상세"""

    def test_related_products_example(self):
        result = jaccard_detailed(["gaming", "computer"], ["gaming", "computer", "laptop", "portable"])
        assert isinstance(result, JaccardResult)
        assert result.score == pytest.approx(0.5)
        assert result.intersection == ["gaming", "computer"]
        assert result.union == ["gaming", "computer", "laptop", "portable"]
        assert result.intersection_size == 2
        assert result.union_size == 4

    def test_empty_union(self):
        result = jaccard_detailed([], "")
        assert result.score == 0
        assert result.intersection == []
        assert result.union == []

    def test_intersection_lowercased(self):
        result = jaccard_detailed(["Gaming"], "GAMING mouse")
        assert result.intersection == ["gaming"]
        assert result.union == ["gaming", "mouse"]
