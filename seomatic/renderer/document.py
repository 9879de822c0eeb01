from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..schemas import SeomaticData
from .components import render_body, render_head, render_seomatic
from .elements import Element
from .head import HeadManager
from .html import to_html


@dataclass(frozen=True)
class Document:
    """Head and body elements of one native-mode render pass."""

    head: Tuple[Element, ...] = ()
    body: Tuple[Element, ...] = ()

    def head_html(self, *, pretty: Optional[bool] = None) -> str:
        return to_html(self.head, pretty=pretty)

    def body_html(self, *, pretty: Optional[bool] = None) -> str:
        return to_html(self.body, pretty=pretty)


def render_document(
    data: SeomaticData | Mapping[str, Any] | None,
    manager: Optional[HeadManager] = None,
) -> Document:
    """Render through a head manager, hoisting head elements out of the tree."""
    manager = manager if manager is not None else HeadManager()
    start = len(manager)
    body = render_seomatic(data, head=manager)
    # Only this pass's elements; the manager may hold earlier ones.
    return Document(head=tuple(manager.elements[start:]), body=tuple(body))


def render_head_html(
    data: SeomaticData | Mapping[str, Any] | None,
    *,
    pretty: Optional[bool] = None,
) -> str:
    return to_html(render_head(data), pretty=pretty)


def render_body_html(
    data: SeomaticData | Mapping[str, Any] | None,
    *,
    pretty: Optional[bool] = None,
) -> str:
    return to_html(render_body(data), pretty=pretty)


__all__ = ["Document", "render_body_html", "render_document", "render_head_html"]
