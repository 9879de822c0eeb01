"""Head placement for rendered elements.

Every head element passes through a ``HeadInjector`` before it is returned.
Generic hosts either skip it (identity: the caller is already inside
``<head>``) or wrap each element in a head component with ``head_wrapper``.
Hosts with their own head primitive use ``HeadManager``, which hoists the
elements and leaves nothing in place.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from ..config import get_settings
from .elements import Element

HeadInjector = Callable[[Element], Optional[Element]]


def identity_head(element: Element) -> Element:
    return element


def resolve_head(head: Optional[HeadInjector]) -> HeadInjector:
    return head if head is not None else identity_head


def head_wrapper(tag: Optional[str] = None) -> HeadInjector:
    """Build an injector wrapping each element in a ``tag`` component."""
    name = tag or get_settings().head_component

    def _wrap(element: Element) -> Element:
        return Element(tag=name, key=element.key, children=(element,), wrapper=True)

    return _wrap


def is_head_wrapper(element: Element) -> bool:
    return element.wrapper and len(element.children) == 1


class HeadManager:
    """Collects head elements during a render pass, in render order."""

    def __init__(self) -> None:
        self._elements: List[Element] = []

    def __call__(self, element: Element) -> None:
        self._elements.append(element)
        return None

    @property
    def elements(self) -> List[Element]:
        return list(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def clear(self) -> None:
        self._elements.clear()


__all__ = [
    "HeadInjector",
    "HeadManager",
    "head_wrapper",
    "identity_head",
    "is_head_wrapper",
    "resolve_head",
]
