"""Matcher algebra: negation, conjunction and disjunction.

Combinators evaluate both operands on every application, so a stateful
right-hand matcher always observes the value. Only the messages are
short-circuited: a conjunction whose left side failed reports the left
side alone, and a disjunction whose left side matched does the same.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from containment._outcome import MatchOutcome

MatchFunction = Callable[[Any], MatchOutcome]


def _compose(joiner: str, left: str, right: str) -> str:
    return f"{left}, {joiner} {right}"


class Matcher:
    """A pure function from a value to a :class:`MatchOutcome`."""

    __slots__ = ("_fn", "name")

    def __init__(self, fn: MatchFunction, name: str | None = None) -> None:
        if not callable(fn):
            raise TypeError(f"Matcher needs a callable, got {type(fn).__name__}")
        self._fn = fn
        self.name = name or getattr(fn, "__name__", "matcher")

    def apply(self, value: Any) -> MatchOutcome:
        outcome = self._fn(value)
        if not isinstance(outcome, MatchOutcome):
            raise TypeError(f"{self.name} returned {type(outcome).__name__}, expected MatchOutcome")
        return outcome

    def __call__(self, value: Any) -> MatchOutcome:
        return self.apply(value)

    def negate(self) -> Matcher:
        return not_(self)

    def and_(self, other: Matcher) -> Matcher:
        return and_(self, other)

    def or_(self, other: Matcher) -> Matcher:
        return or_(self, other)

    def __invert__(self) -> Matcher:
        return not_(self)

    def __and__(self, other: Matcher) -> Matcher:
        return and_(self, other)

    def __or__(self, other: Matcher) -> Matcher:
        return or_(self, other)

    def __repr__(self) -> str:
        return f"<Matcher {self.name}>"


def _require_matcher(m: Any) -> Matcher:
    if not isinstance(m, Matcher):
        raise TypeError(f"expected a Matcher, got {type(m).__name__}")
    return m


def not_(matcher: Matcher) -> Matcher:
    inner = _require_matcher(matcher)

    def negated(value: Any) -> MatchOutcome:
        return inner.apply(value).negated()

    return Matcher(negated, name=f"not {inner.name}")


def and_(left: Matcher, right: Matcher) -> Matcher:
    lhs = _require_matcher(left)
    rhs = _require_matcher(right)

    def conjunction(value: Any) -> MatchOutcome:
        l_res = lhs.apply(value)
        r_res = rhs.apply(value)
        if not l_res.matched:
            return l_res
        return MatchOutcome(
            r_res.matched,
            _compose("but", l_res.negated_failure_message, r_res.mid_sentence_failure_message),
            _compose("and", l_res.negated_failure_message, r_res.mid_sentence_negated_failure_message),
            _compose("but", l_res.mid_sentence_negated_failure_message, r_res.mid_sentence_failure_message),
            _compose("and", l_res.mid_sentence_negated_failure_message, r_res.mid_sentence_negated_failure_message),
        )

    return Matcher(conjunction, name=f"({lhs.name} and {rhs.name})")


def or_(left: Matcher, right: Matcher) -> Matcher:
    lhs = _require_matcher(left)
    rhs = _require_matcher(right)

    def disjunction(value: Any) -> MatchOutcome:
        l_res = lhs.apply(value)
        r_res = rhs.apply(value)
        if l_res.matched:
            # Left side decided the verdict; report it without the right side.
            return MatchOutcome(
                True,
                l_res.negated_failure_message,
                l_res.failure_message,
                l_res.mid_sentence_negated_failure_message,
                l_res.mid_sentence_failure_message,
            )
        return MatchOutcome(
            r_res.matched,
            _compose("and", l_res.failure_message, r_res.mid_sentence_failure_message),
            _compose("and", l_res.failure_message, r_res.mid_sentence_negated_failure_message),
            _compose("and", l_res.mid_sentence_failure_message, r_res.mid_sentence_failure_message),
            _compose("and", l_res.mid_sentence_failure_message, r_res.mid_sentence_negated_failure_message),
        )

    return Matcher(disjunction, name=f"({lhs.name} or {rhs.name})")


def _a_or_an(article: str, noun: str, predicate: Callable[[Any], bool]) -> Matcher:
    def check(value: Any) -> MatchOutcome:
        return MatchOutcome.of(
            bool(predicate(value)),
            f"{value!r} was not {article} {noun}",
            f"{value!r} was {article} {noun}",
        )

    return Matcher(check, name=f"{article} {noun}")


def a(noun: str, predicate: Callable[[Any], bool]) -> Matcher:
    """Wrap a one-argument predicate as a Matcher named by a noun phrase."""
    return _a_or_an("a", noun, predicate)


def an(noun: str, predicate: Callable[[Any], bool]) -> Matcher:
    return _a_or_an("an", noun, predicate)
