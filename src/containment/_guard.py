from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from containment._equality import Equality, contains

logger = logging.getLogger(__name__)


class DuplicateExpectedElement(ValueError):
    """An expected collection that must be distinct repeats an element.

    Raised while a policy is being built, before any comparison runs.
    """

    def __init__(self, policy: str, element: Any) -> None:
        self.policy = policy
        self.element = element
        super().__init__(f"{policy} must not contain duplicated value, but {element!r} is duplicated")


def reject_duplicates(policy: str, expected: Iterable[Any], eq: Equality) -> None:
    seen: list[Any] = []
    for element in expected:
        if contains(seen, element, eq):
            logger.warning("rejecting %s arguments: %r is duplicated", policy, element)
            raise DuplicateExpectedElement(policy, element)
        seen.append(element)
