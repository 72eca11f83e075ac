"""Element equality used by every containment policy.

Policies compare elements through an ``eq(a, b) -> bool`` callable instead
of ``==`` directly, so callers can plug in a normalizing comparison
(case-insensitive text, trimmed whitespace, ...) without touching the
algorithms. Elements need not be hashable; lookups are linear scans.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

Equality = Callable[[Any, Any], bool]


def default_eq(a: Any, b: Any) -> bool:
    return bool(a == b)


def normalized(fn: Callable[[Any], Any]) -> Equality:
    """Equality that compares ``fn(a) == fn(b)``.

    >>> eq = normalized(str.lower)
    >>> eq("Hello", "HELLO")
    True
    """
    if not callable(fn):
        raise ValueError(f"normalized() needs a callable, got {fn!r}")

    def eq(a: Any, b: Any) -> bool:
        return bool(fn(a) == fn(b))

    eq.__name__ = f"normalized({getattr(fn, '__name__', repr(fn))})"
    return eq


def resolve_eq(eq: Equality | None) -> Equality:
    """Resolve an eq parameter.

    Args:
        eq: Either None (use ==) or a two-argument callable.

    Returns:
        A callable equality function.
    """
    if eq is None:
        return default_eq
    if callable(eq):
        return eq
    raise ValueError(f"Invalid eq parameter: {eq!r}. Expected None or a callable.")


def contains(items: Sequence[Any], element: Any, eq: Equality) -> bool:
    return any(eq(item, element) for item in items)


def last_index_of(items: Sequence[Any], element: Any, eq: Equality) -> int:
    for i in range(len(items) - 1, -1, -1):
        if eq(items[i], element):
            return i
    return -1
