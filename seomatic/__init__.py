"""Render SEOmatic meta containers as HTML head and body markup."""

from .exceptions import ContainerDecodeError, TrackedError
from .renderer import (
    Document,
    Element,
    HeadManager,
    head_wrapper,
    normalize,
    render_body,
    render_body_html,
    render_document,
    render_head,
    render_head_html,
    render_seomatic,
    to_html,
)
from .schemas import SeomaticData

__version__ = "0.1.0"

__all__ = [
    "ContainerDecodeError",
    "Document",
    "Element",
    "HeadManager",
    "SeomaticData",
    "TrackedError",
    "head_wrapper",
    "normalize",
    "render_body",
    "render_body_html",
    "render_document",
    "render_head",
    "render_head_html",
    "render_seomatic",
    "to_html",
]
