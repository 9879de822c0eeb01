from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Element:
    """A markup descriptor handed to the host renderer.

    ``text`` is escaped on output, ``inner_html`` is inserted verbatim.
    ``key`` identifies the element among its siblings and is never rendered.
    ``wrapper`` marks a head placement wrapper, which serializes as its child.
    """

    tag: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    key: Optional[str] = None
    text: Optional[str] = None
    inner_html: Optional[str] = None
    children: Tuple["Element", ...] = ()
    wrapper: bool = False


__all__ = ["Element"]
