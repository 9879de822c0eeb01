from __future__ import annotations

import html as html_lib
from typing import Any, Iterable, List, Mapping, Optional

from ..config import get_settings
from .elements import Element
from .head import is_head_wrapper

VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


def _format_style(style: Mapping[str, Any]) -> str:
    declarations = [f"{name}: {value}" for name, value in style.items() if value is not None]
    return "; ".join(declarations)


def _format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_attrs(attrs: Mapping[str, Any]) -> str:
    parts: List[str] = []
    for name, value in attrs.items():
        if name == "key" or value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if name == "style" and isinstance(value, Mapping):
            value = _format_style(value)
        escaped = html_lib.escape(_format_value(value), quote=True)
        parts.append(f" {name}=\"{escaped}\"")
    return "".join(parts)


def render_element(element: Element) -> str:
    if is_head_wrapper(element):
        return render_element(element.children[0])

    opening = f"<{element.tag}{render_attrs(element.attrs)}>"
    if element.tag in VOID_TAGS:
        return opening

    if element.inner_html is not None:
        content = element.inner_html
    elif element.text is not None:
        content = html_lib.escape(element.text, quote=False)
    else:
        content = "".join(render_element(child) for child in element.children)
    return f"{opening}{content}</{element.tag}>"


def to_html(
    elements: Iterable[Element],
    *,
    pretty: Optional[bool] = None,
) -> str:
    """Serialize descriptors to an HTML fragment.

    Head wrapper elements are transparent. ``inner_html`` is trusted CMS
    markup and is written as-is.
    """
    if pretty is None:
        pretty = get_settings().pretty
    rendered = [render_element(element) for element in elements]
    separator = "\n" if pretty else ""
    return separator.join(rendered)


__all__ = ["VOID_TAGS", "render_attrs", "render_element", "to_html"]
