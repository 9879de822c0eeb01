"""Render functions for each SEOmatic container.

Each function takes the raw JSON string of one container and returns a list
of ``Element`` descriptors. Missing input, and input of the wrong shape,
renders nothing. Malformed JSON raises ``ContainerDecodeError``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from ..config import get_settings
from ..exceptions import ContainerDecodeError
from ..schemas import ScriptEntry, SeomaticData, TitleContainer
from .elements import Element
from .head import HeadInjector, resolve_head
from .normalizer import is_truthy, normalize

logger = logging.getLogger(__name__)

JSON_LD_KEY = "metaJsonLdContainer.mainEntityOfPage"
JSON_LD_TYPE = "application/ld+json"
BODY_SCRIPT_STYLE = {"display": "none !important"}


def parse_container(raw: str, name: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ContainerDecodeError(name, exc.msg) from exc


def _place(elements: Iterable[Element], head: Optional[HeadInjector]) -> List[Element]:
    injector = resolve_head(head)
    placed: List[Element] = []
    for element in elements:
        result = injector(element)
        if result is not None:
            placed.append(result)
    return placed


def _load_mapping(raw: Optional[str], name: str) -> Optional[Mapping[str, Any]]:
    if not is_truthy(raw):
        return None
    container = parse_container(raw, name)
    if not isinstance(container, Mapping):
        logger.debug("%s is not a JSON object; nothing to render", name)
        return None
    return container


def _tag_elements(container: Optional[Mapping[str, Any]], tag: str) -> List[Element]:
    elements: List[Element] = []
    for record in normalize(container):
        attrs = {name: value for name, value in record.items() if name != "key"}
        elements.append(Element(tag=tag, attrs=attrs, key=str(record["key"])))
    return elements


def _script_entries(container: Mapping[str, Any]) -> Iterable[tuple[str, ScriptEntry]]:
    for key, value in container.items():
        if not is_truthy(key) or not is_truthy(value):
            continue
        try:
            entry = ScriptEntry.model_validate(value)
        except ValidationError:
            logger.debug("Skipping script entry %r: unexpected shape", key)
            continue
        yield key, entry


def render_meta_json_ld(
    meta_json_ld_container: Optional[str],
    head: Optional[HeadInjector] = None,
) -> List[Element]:
    container = _load_mapping(meta_json_ld_container, "metaJsonLdContainer")
    if container is None:
        return []

    main_entity = container.get("mainEntityOfPage")
    if not is_truthy(main_entity):
        logger.debug("metaJsonLdContainer has no mainEntityOfPage")
        return []

    payload = json.dumps(
        main_entity,
        ensure_ascii=get_settings().json_ld_ensure_ascii,
        separators=(",", ":"),
    )
    script = Element(
        tag="script",
        attrs={"type": JSON_LD_TYPE},
        key=JSON_LD_KEY,
        inner_html=payload,
    )
    return _place([script], head)


def render_meta_links(
    meta_link_container: Optional[str],
    head: Optional[HeadInjector] = None,
) -> List[Element]:
    container = _load_mapping(meta_link_container, "metaLinkContainer")
    return _place(_tag_elements(container, "link"), head)


def render_meta_tags(
    meta_tag_container: Optional[str],
    head: Optional[HeadInjector] = None,
) -> List[Element]:
    container = _load_mapping(meta_tag_container, "metaTagContainer")
    return _place(_tag_elements(container, "meta"), head)


def render_meta_scripts(
    meta_script_container: Optional[str],
    head: Optional[HeadInjector] = None,
) -> List[Element]:
    container = _load_mapping(meta_script_container, "metaScriptContainer")
    if container is None:
        return []

    scripts = [
        Element(tag="script", key=key, inner_html=entry.script)
        for key, entry in _script_entries(container)
        if is_truthy(entry.script)
    ]
    return _place(scripts, head)


def render_meta_body_scripts(meta_script_container: Optional[str]) -> List[Element]:
    container = _load_mapping(meta_script_container, "metaScriptContainer")
    if container is None:
        return []

    return [
        Element(
            tag="div",
            attrs={"style": dict(BODY_SCRIPT_STYLE)},
            key=key,
            inner_html=entry.body_script,
        )
        for key, entry in _script_entries(container)
        if is_truthy(entry.body_script)
    ]


def render_meta_title(
    meta_title_container: Optional[str],
    head: Optional[HeadInjector] = None,
) -> List[Element]:
    container = _load_mapping(meta_title_container, "metaTitleContainer")
    if container is None:
        return []

    try:
        parsed = TitleContainer.model_validate(container)
    except ValidationError:
        logger.debug("metaTitleContainer has an unexpected shape")
        return []

    if parsed.title is None or not is_truthy(parsed.title.title):
        return []

    return _place([Element(tag="title", text=parsed.title.title)], head)


def render_head(
    data: SeomaticData | Mapping[str, Any] | None,
    head: Optional[HeadInjector] = None,
) -> List[Element]:
    seomatic = SeomaticData.coerce(data)
    return [
        *render_meta_json_ld(seomatic.meta_json_ld_container, head),
        *render_meta_links(seomatic.meta_link_container, head),
        *render_meta_scripts(seomatic.meta_script_container, head),
        *render_meta_tags(seomatic.meta_tag_container, head),
        *render_meta_title(seomatic.meta_title_container, head),
    ]


def render_body(data: SeomaticData | Mapping[str, Any] | None) -> List[Element]:
    seomatic = SeomaticData.coerce(data)
    return render_meta_body_scripts(seomatic.meta_script_container)


def render_seomatic(
    data: SeomaticData | Mapping[str, Any] | None,
    head: Optional[HeadInjector] = None,
) -> List[Element]:
    """Render head elements followed by body elements."""
    seomatic = SeomaticData.coerce(data)
    return [*render_head(seomatic, head), *render_body(seomatic)]


__all__ = [
    "BODY_SCRIPT_STYLE",
    "JSON_LD_KEY",
    "JSON_LD_TYPE",
    "parse_container",
    "render_body",
    "render_head",
    "render_meta_body_scripts",
    "render_meta_json_ld",
    "render_meta_links",
    "render_meta_scripts",
    "render_meta_tags",
    "render_meta_title",
    "render_seomatic",
]
