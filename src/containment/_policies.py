"""Collection containment policies.

Each policy binds an expected collection at construction time and checks
an actual collection when applied. Six of the eight kinds require their
expected elements to be distinct and reject repeats immediately; the two
whole-collection kinds compare multisets or positions, where repeats are
meaningful.

All comparisons go through the policy's ``eq`` callable, always called as
``eq(actual_element, expected_element)``.
"""

from __future__ import annotations

import dataclasses
import itertools
import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

from containment._elements import elements_of, render_arguments, render_collection
from containment._equality import Equality, contains, last_index_of, resolve_eq
from containment._guard import reject_duplicates
from containment._matcher import Matcher
from containment._outcome import MatchOutcome

logger = logging.getLogger(__name__)

_END = object()


class PolicyKind(str, Enum):
    """Supported containment relationships."""

    THE_SAME_ELEMENTS_AS = "the_same_elements_as"
    THE_SAME_ITERATED_ELEMENTS_AS = "the_same_iterated_elements_as"
    ALL_OF = "all_of"
    IN_ORDER = "in_order"
    ONE_OF = "one_of"
    ONLY = "only"
    IN_ORDER_ONLY = "in_order_only"
    NONE_OF = "none_of"


# ---------------------------------------------------------------------------
# Algorithms: (actual, expected, eq) -> matched
# ---------------------------------------------------------------------------

def _the_same_elements_as(actual: Sequence[Any], expected: Sequence[Any], eq: Equality) -> bool:
    # Expected elements pulled from the iterator but not yet paired with an actual one.
    pending: list[Any] = []
    remaining = iter(expected)
    for a in actual:
        for i, p in enumerate(pending):
            if eq(a, p):
                del pending[i]
                break
        else:
            for e in remaining:
                if eq(a, e):
                    break
                pending.append(e)
            else:
                return False
    return next(remaining, _END) is _END and not pending


def _the_same_iterated_elements_as(actual: Sequence[Any], expected: Sequence[Any], eq: Equality) -> bool:
    for a, e in itertools.zip_longest(actual, expected, fillvalue=_END):
        if a is _END or e is _END:
            return False
        if not eq(a, e):
            return False
    return True


def _all_of(actual: Sequence[Any], expected: Sequence[Any], eq: Equality) -> bool:
    for e in expected:
        if not contains(actual, e, eq):
            return False
    return True


def _in_order(actual: Sequence[Any], expected: Sequence[Any], eq: Equality) -> bool:
    view = actual
    for e in expected:
        # Last occurrence in the remaining view, not the first.
        idx = last_index_of(view, e, eq)
        if idx < 0:
            return False
        view = view[idx + 1:]
    return True


def _one_of(actual: Sequence[Any], expected: Sequence[Any], eq: Equality) -> bool:
    for e in expected:
        if contains(actual, e, eq):
            return True
    return False


def _only(actual: Sequence[Any], expected: Sequence[Any], eq: Equality) -> bool:
    confirmed: list[Any] = []
    for a in actual:
        if contains(confirmed, a, eq):
            continue
        if not any(eq(a, e) for e in expected):
            return False
        confirmed.append(a)
    return True


def _in_order_only(actual: Sequence[Any], expected: Sequence[Any], eq: Equality) -> bool:
    stops = iter(expected)
    current = next(stops, _END)
    for a in actual:
        if current is not _END and eq(a, current):
            continue
        current = next(stops, _END)
        if current is _END or not eq(a, current):
            return False
    return True


def _none_of(actual: Sequence[Any], expected: Sequence[Any], eq: Equality) -> bool:
    checked: list[Any] = []
    for a in actual:
        if contains(checked, a, eq):
            continue
        if any(eq(a, e) for e in expected):
            return False
        checked.append(a)
    return True


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class _PolicyDef:
    algorithm: Callable[[Sequence[Any], Sequence[Any], Equality], bool]
    failure: str
    negated_failure: str
    distinct: bool = True
    whole_collection: bool = False


_POLICIES: dict[PolicyKind, _PolicyDef] = {
    PolicyKind.THE_SAME_ELEMENTS_AS: _PolicyDef(
        _the_same_elements_as,
        "{actual} did not contain the same elements as {expected}",
        "{actual} contained the same elements as {expected}",
        distinct=False,
        whole_collection=True,
    ),
    PolicyKind.THE_SAME_ITERATED_ELEMENTS_AS: _PolicyDef(
        _the_same_iterated_elements_as,
        "{actual} did not contain the same iterated elements as {expected}",
        "{actual} contained the same iterated elements as {expected}",
        distinct=False,
        whole_collection=True,
    ),
    PolicyKind.ALL_OF: _PolicyDef(
        _all_of,
        "{actual} did not contain all of ({expected})",
        "{actual} contained all of ({expected})",
    ),
    PolicyKind.IN_ORDER: _PolicyDef(
        _in_order,
        "{actual} did not contain all of ({expected}) in order",
        "{actual} contained all of ({expected}) in order",
    ),
    PolicyKind.ONE_OF: _PolicyDef(
        _one_of,
        "{actual} did not contain one of ({expected})",
        "{actual} contained one of ({expected})",
    ),
    PolicyKind.ONLY: _PolicyDef(
        _only,
        "{actual} did not contain only ({expected})",
        "{actual} contained only ({expected})",
    ),
    PolicyKind.IN_ORDER_ONLY: _PolicyDef(
        _in_order_only,
        "{actual} did not contain only ({expected}) in order",
        "{actual} contained only ({expected}) in order",
    ),
    PolicyKind.NONE_OF: _PolicyDef(
        _none_of,
        "{actual} contained one of ({expected})",
        "{actual} did not contain one of ({expected})",
    ),
}


class ContainmentPolicy(Matcher):
    """A containment relationship bound to an expected collection.

    Construction validates the expected elements (raising
    :class:`DuplicateExpectedElement` for the distinct-only kinds); after
    that the policy is an immutable Matcher over actual collections.
    """

    __slots__ = ("_definition", "_eq", "_expected", "_kind")

    def __init__(self, kind: PolicyKind | str, expected: Iterable[Any], *, eq: Equality | None = None) -> None:
        self._kind = PolicyKind(kind)
        self._eq = resolve_eq(eq)
        self._expected = tuple(elements_of(expected))
        self._definition = _POLICIES[self._kind]
        if self._definition.distinct:
            reject_duplicates(self._kind.value, self._expected, self._eq)
        logger.debug("built %s policy over %d expected element(s)", self._kind.value, len(self._expected))
        super().__init__(self._evaluate, name=self._kind.value)

    @property
    def kind(self) -> PolicyKind:
        return self._kind

    @property
    def eq(self) -> Equality:
        return self._eq

    @property
    def expected(self) -> tuple[Any, ...]:
        return self._expected

    def _render_expected(self) -> str:
        if self._definition.whole_collection:
            return render_collection(self.expected)
        return render_arguments(self.expected)

    def _evaluate(self, actual: Any) -> MatchOutcome:
        elements = elements_of(actual)
        matched = self._definition.algorithm(elements, self.expected, self.eq)
        fields = {"actual": render_collection(elements), "expected": self._render_expected()}
        return MatchOutcome.of(
            matched,
            self._definition.failure.format(**fields),
            self._definition.negated_failure.format(**fields),
        )

    def __repr__(self) -> str:
        return f"{self.kind.value}({self._render_expected()})"


def make_policy(kind: PolicyKind | str, expected: Iterable[Any], *, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(kind, expected, eq=eq)


def the_same_elements_as(expected: Iterable[Any], *, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(PolicyKind.THE_SAME_ELEMENTS_AS, expected, eq=eq)


def the_same_iterated_elements_as(expected: Iterable[Any], *, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(PolicyKind.THE_SAME_ITERATED_ELEMENTS_AS, expected, eq=eq)


def all_of(*expected: Any, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(PolicyKind.ALL_OF, expected, eq=eq)


def in_order(*expected: Any, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(PolicyKind.IN_ORDER, expected, eq=eq)


def one_of(*expected: Any, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(PolicyKind.ONE_OF, expected, eq=eq)


def only(*expected: Any, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(PolicyKind.ONLY, expected, eq=eq)


def in_order_only(*expected: Any, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(PolicyKind.IN_ORDER_ONLY, expected, eq=eq)


def none_of(*expected: Any, eq: Equality | None = None) -> ContainmentPolicy:
    return ContainmentPolicy(PolicyKind.NONE_OF, expected, eq=eq)


# ---------------------------------------------------------------------------
# Single-element containment
# ---------------------------------------------------------------------------

def contain(element: Any, *, eq: Equality | None = None) -> Matcher:
    equal = resolve_eq(eq)

    def check(actual: Any) -> MatchOutcome:
        elements = elements_of(actual)
        rendered = render_collection(elements)
        return MatchOutcome.of(
            contains(elements, element, equal),
            f"{rendered} did not contain element {element!r}",
            f"{rendered} contained element {element!r}",
        )

    return Matcher(check, name=f"contain {element!r}")


def _contain_a_or_an(article: str, noun: str, predicate: Callable[[Any], bool]) -> Matcher:
    def check(actual: Any) -> MatchOutcome:
        elements = elements_of(actual)
        rendered = render_collection(elements)
        failure = f"{rendered} did not contain {article} {noun}"
        for x in elements:
            if predicate(x):
                found = f"{rendered} contained {article} {noun}: {x!r} was {article} {noun}"
                return MatchOutcome.of(True, failure, found)
        return MatchOutcome.of(False, failure, f"{rendered} contained {article} {noun}")

    return Matcher(check, name=f"contain {article} {noun}")


def contain_a(noun: str, predicate: Callable[[Any], bool]) -> Matcher:
    """Matched when some element satisfies ``predicate``."""
    return _contain_a_or_an("a", noun, predicate)


def contain_an(noun: str, predicate: Callable[[Any], bool]) -> Matcher:
    return _contain_a_or_an("an", noun, predicate)
