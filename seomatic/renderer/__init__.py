"""Renderer for SEOmatic head and body tags."""

from .components import (
    render_body,
    render_head,
    render_meta_body_scripts,
    render_meta_json_ld,
    render_meta_links,
    render_meta_scripts,
    render_meta_tags,
    render_meta_title,
    render_seomatic,
)
from .document import Document, render_body_html, render_document, render_head_html
from .elements import Element
from .head import HeadInjector, HeadManager, head_wrapper, identity_head
from .html import to_html
from .normalizer import Many, Single, is_truthy, normalize

__all__ = [
    "Document",
    "Element",
    "HeadInjector",
    "HeadManager",
    "Many",
    "Single",
    "head_wrapper",
    "identity_head",
    "is_truthy",
    "normalize",
    "render_body",
    "render_body_html",
    "render_document",
    "render_head",
    "render_head_html",
    "render_meta_body_scripts",
    "render_meta_json_ld",
    "render_meta_links",
    "render_meta_scripts",
    "render_meta_tags",
    "render_meta_title",
    "render_seomatic",
    "to_html",
]
