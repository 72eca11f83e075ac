from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def elements_of(value: Any) -> list[Any]:
    """Ordered elements of a container as the policies see them.

    Mappings contribute their ``(key, value)`` pairs; every other iterable
    contributes its iteration order (sets in whatever order they iterate).
    """
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, Iterable):
        return list(value)
    raise TypeError(f"expected a collection, got {type(value).__name__}: {value!r}")


def render_collection(elements: Iterable[Any]) -> str:
    return repr(list(elements))


def render_arguments(elements: Iterable[Any]) -> str:
    return ", ".join(repr(e) for e in elements)
