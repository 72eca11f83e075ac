from containment._cli import main
from containment._elements import elements_of
from containment._equality import normalized, resolve_eq
from containment._expect import MatchFailed, expect
from containment._guard import DuplicateExpectedElement
from containment._laws import LawResult, check_laws
from containment._matcher import Matcher, a, an, and_, not_, or_
from containment._outcome import MatchOutcome
from containment._policies import (
    ContainmentPolicy,
    PolicyKind,
    all_of,
    contain,
    contain_a,
    contain_an,
    in_order,
    in_order_only,
    make_policy,
    none_of,
    one_of,
    only,
    the_same_elements_as,
    the_same_iterated_elements_as,
)
from containment._runner import CaseResult, check_cases

__all__ = [
    "CaseResult",
    "ContainmentPolicy",
    "DuplicateExpectedElement",
    "LawResult",
    "MatchFailed",
    "MatchOutcome",
    "Matcher",
    "PolicyKind",
    "a",
    "all_of",
    "an",
    "and_",
    "check_cases",
    "check_laws",
    "contain",
    "contain_a",
    "contain_an",
    "elements_of",
    "expect",
    "in_order",
    "in_order_only",
    "main",
    "make_policy",
    "none_of",
    "normalized",
    "not_",
    "one_of",
    "only",
    "or_",
    "resolve_eq",
    "the_same_elements_as",
    "the_same_iterated_elements_as",
]
