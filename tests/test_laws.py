"""Tests for matcher law checking."""

from __future__ import annotations

from hypothesis import strategies as st

from containment._laws import LawResult, check_laws
from containment._matcher import Matcher
from containment._outcome import MatchOutcome
from containment._policies import in_order, the_same_elements_as

LAW_NAMES = {
    "negation_involution",
    "outcome_consistent",
    "deterministic",
    "conjunction_idempotent",
    "disjunction_idempotent",
}


class TestCheckLaws:
    def test_policy_satisfies_every_law(self):
        results = check_laws(in_order(1, 2), max_examples=50)
        assert {r.name for r in results} == LAW_NAMES
        assert all(r.holds for r in results)

    def test_custom_values_strategy(self):
        values = st.lists(st.sampled_from("abc"), max_size=5)
        results = check_laws(the_same_elements_as("ab"), values, max_examples=30)
        assert all(r.holds for r in results)

    def test_detects_nondeterminism(self):
        calls = [0]

        def flip(_x: object) -> MatchOutcome:
            calls[0] += 1
            return MatchOutcome.of(calls[0] % 2 == 0, "odd call", "even call")

        results = {r.name: r for r in check_laws(Matcher(flip), max_examples=20)}
        assert results["deterministic"].holds is False


class TestLawResult:
    def test_to_dict(self):
        d = LawResult("deterministic", "M(x) == M(x)", False, (1, 2)).to_dict()
        assert d == {
            "name": "deterministic",
            "description": "M(x) == M(x)",
            "holds": False,
            "counterexample": [1, 2],
        }
