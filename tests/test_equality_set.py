"""
Tests for the structural-equality set and the rule models built on it.
"""

from gogar.scorekeeping import EqualitySet, Inference
from gogar.scorekeeping.rules import make_inference


class TestEqualitySet:
    """Tests for EqualitySet membership and set algebra."""

    def test_add_is_idempotent_by_value(self) -> None:
        """Adding an equal value twice leaves one member."""
        s = EqualitySet()
        s.add("A is red")
        size_after_one = len(s)
        s.add("A is " + "red")
        assert len(s) == size_after_one == 1

    def test_constructor_drops_duplicates_and_keeps_order(self) -> None:
        s = EqualitySet(["b", "a", "b", "c", "a"])
        assert s.to_list() == ["b", "a", "c"]

    def test_delete_absent_is_noop(self) -> None:
        s = EqualitySet(["a"])
        s.delete("z")
        assert s == EqualitySet(["a"])

    def test_delete_removes_equal_member(self) -> None:
        s = EqualitySet(["a", "b"])
        s.delete("a")
        assert "a" not in s
        assert s.to_list() == ["b"]

    def test_equality_ignores_order(self) -> None:
        assert EqualitySet(["a", "b"]) == EqualitySet(["b", "a"])
        assert EqualitySet(["a", "b"]) != EqualitySet(["a"])

    def test_nested_sets_deduplicate_structurally(self) -> None:
        """Sets of sets treat equal inner sets as one member."""
        outer = EqualitySet()
        outer.add(EqualitySet(["A is red", "A is blue"]))
        outer.add(EqualitySet(["A is blue", "A is red"]))
        assert len(outer) == 1
        assert EqualitySet(["A is red", "A is blue"]) in outer

    def test_set_algebra(self) -> None:
        left = EqualitySet(["a", "b", "c"])
        right = EqualitySet(["b", "c", "d"])

        assert (left | right) == EqualitySet(["a", "b", "c", "d"])
        assert (left & right) == EqualitySet(["b", "c"])
        assert (left - right) == EqualitySet(["a"])
        assert EqualitySet(["b"]) <= left
        assert not left <= right
        assert EqualitySet() <= right

    def test_algebra_does_not_mutate_operands(self) -> None:
        left = EqualitySet(["a"])
        _ = left | ["b"]
        _ = left - ["a"]
        assert left.to_list() == ["a"]

    def test_str_renders_braces(self) -> None:
        assert str(EqualitySet(["A is red", "A is colored"])) == "{A is red, A is colored}"
        assert str(EqualitySet()) == "{}"


class TestInference:
    """Tests for structural equality of inferences."""

    def test_equal_when_premise_sets_match(self) -> None:
        first = make_inference(["A is red", "A is fragrant"], "A is edible")
        second = make_inference(["A is fragrant", "A is red", "A is red"], "A is edible")
        assert first == second
        assert hash(first) == hash(second)

    def test_conclusion_matters(self) -> None:
        assert make_inference(["p"], "q") != make_inference(["p"], "r")

    def test_duplicate_premises_are_dropped(self) -> None:
        inference = Inference(premises=["p", "q", "p"], conclusion="r")
        assert inference.premises == ("p", "q")

    def test_inference_set_deduplicates(self) -> None:
        rules = EqualitySet([make_inference(["p", "q"], "r")])
        rules.add(make_inference(["q", "p"], "r"))
        assert len(rules) == 1

    def test_str(self) -> None:
        assert str(make_inference(["A is red"], "A is colored")) == "{A is red} |- A is colored"
