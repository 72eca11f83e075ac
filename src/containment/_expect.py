from __future__ import annotations

from typing import Any

from containment._matcher import Matcher
from containment._outcome import MatchOutcome


class MatchFailed(AssertionError):
    def __init__(self, outcome: MatchOutcome) -> None:
        self.outcome = outcome
        super().__init__(outcome.failure_message)


def expect(actual: Any, matcher: Matcher) -> MatchOutcome:
    """Apply ``matcher`` to ``actual``; raise :class:`MatchFailed` if it did not match."""
    outcome = matcher.apply(actual)
    if not outcome.matched:
        raise MatchFailed(outcome)
    return outcome
