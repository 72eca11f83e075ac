"""Algebraic law checks for matchers.

Quick Hypothesis runs that confirm a matcher behaves like the value-level
function the combinators assume:

- negation_involution: not(not(M))(x) == M(x), messages included
- outcome_consistent: not(M)(x) flips the verdict and swaps the messages
- deterministic: two applications to the same value agree
- conjunction_idempotent: (M and M)(x).matched == M(x).matched
- disjunction_idempotent: (M or M)(x).matched == M(x).matched
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st
from hypothesis.errors import Flaky

from containment._matcher import Matcher, and_, not_, or_
from containment._util import _jsonable

logger = logging.getLogger(__name__)


class LawResult:
    """Outcome of checking one law against one matcher."""

    __slots__ = ("counterexample", "description", "holds", "name")

    def __init__(self, name: str, description: str, holds: bool, counterexample: Any = None) -> None:
        self.name = name
        self.description = description
        self.holds = holds
        self.counterexample = counterexample

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "holds": self.holds,
            "counterexample": _jsonable(self.counterexample),
        }

    def __repr__(self) -> str:
        return f"LawResult({self.name!r}, holds={self.holds})"


def default_values(max_size: int = 10) -> st.SearchStrategy[list[int]]:
    """Small integer lists; a narrow range keeps repeats and overlaps likely."""
    return st.lists(st.integers(min_value=0, max_value=5), max_size=max_size)


def _quick_check(
    predicate: Callable[[Any], bool],
    values: st.SearchStrategy[Any],
    *,
    max_examples: int,
) -> tuple[bool, Any]:
    """Return (True, None) if no counterexample found, else (False, value)."""
    failing: list[Any] = []

    @settings(
        max_examples=max_examples,
        deadline=None,
        suppress_health_check=[HealthCheck.too_slow, HealthCheck.filter_too_much],
        database=None,
    )
    @given(values)
    def prop(value: Any) -> None:
        if not predicate(value):
            failing[:] = [value]
            raise AssertionError("law violated")

    try:
        prop()
    except (AssertionError, Flaky):
        return False, failing[0] if failing else None
    return True, None


def check_laws(
    matcher: Matcher,
    values: st.SearchStrategy[Any] | None = None,
    *,
    max_examples: int = 200,
) -> list[LawResult]:
    """Check the matcher laws, returning one :class:`LawResult` per law.

    Exceptions raised by the matcher itself propagate; a matcher that
    raises on generated input is not a well-formed matcher for ``values``.
    """
    strat = values if values is not None else default_values()
    negated = not_(matcher)
    double_negated = not_(negated)
    conj = and_(matcher, matcher)
    disj = or_(matcher, matcher)

    def involution(x: Any) -> bool:
        return double_negated.apply(x) == matcher.apply(x)

    def consistent(x: Any) -> bool:
        plain = matcher.apply(x)
        neg = negated.apply(x)
        return (
            neg.matched is (not plain.matched)
            and neg.failure_message == plain.negated_failure_message
            and neg.negated_failure_message == plain.failure_message
            and neg.mid_sentence_failure_message == plain.mid_sentence_negated_failure_message
            and neg.mid_sentence_negated_failure_message == plain.mid_sentence_failure_message
        )

    def deterministic(x: Any) -> bool:
        return matcher.apply(x) == matcher.apply(x)

    def conj_idempotent(x: Any) -> bool:
        return conj.apply(x).matched == matcher.apply(x).matched

    def disj_idempotent(x: Any) -> bool:
        return disj.apply(x).matched == matcher.apply(x).matched

    laws: list[tuple[str, str, Callable[[Any], bool]]] = [
        ("negation_involution", "not(not(M))(x) == M(x)", involution),
        ("outcome_consistent", "not(M)(x) flips matched and swaps messages", consistent),
        ("deterministic", "M(x) == M(x)", deterministic),
        ("conjunction_idempotent", "(M and M)(x).matched == M(x).matched", conj_idempotent),
        ("disjunction_idempotent", "(M or M)(x).matched == M(x).matched", disj_idempotent),
    ]

    results: list[LawResult] = []
    for name, description, predicate in laws:
        holds, ce = _quick_check(predicate, strat, max_examples=max_examples)
        logger.debug("law %s on %s: %s", name, matcher.name, "holds" if holds else "violated")
        results.append(LawResult(name, description, holds, ce))
    return results
