import json

import pytest

from seomatic import config
from seomatic.exceptions import ContainerDecodeError
from seomatic.renderer import (
    Element,
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
from seomatic.renderer.components import BODY_SCRIPT_STYLE, JSON_LD_KEY


SEOMATIC = {
    "metaJsonLdContainer": json.dumps(
        {"mainEntityOfPage": {"@context": "http://schema.org", "@type": "WebPage", "name": "Home"}}
    ),
    "metaLinkContainer": json.dumps(
        {
            "canonical": {"href": "https://example.com/", "rel": "canonical"},
            "alternate": [
                {"href": "https://example.com/", "hreflang": "en", "rel": "alternate"},
                {"href": "https://example.com/de/", "hreflang": "de", "rel": "alternate"},
            ],
        }
    ),
    "metaScriptContainer": json.dumps(
        {
            "gtag": {"script": "window.dataLayer = [];", "bodyScript": "<noscript>gtag</noscript>"},
            "fbq": {"script": "fbq('init');"},
            "gtm": {"bodyScript": "<noscript><iframe src=\"https://gtm\"></iframe></noscript>"},
        }
    ),
    "metaTagContainer": json.dumps(
        {
            "description": {"content": "Welcome", "name": "description"},
            "og:locale:alternate": [],
        }
    ),
    "metaTitleContainer": json.dumps({"title": {"title": "Home | Example"}}),
}


@pytest.mark.parametrize(
    "render",
    [
        render_meta_json_ld,
        render_meta_links,
        render_meta_scripts,
        render_meta_tags,
        render_meta_title,
        render_meta_body_scripts,
    ],
)
@pytest.mark.parametrize("raw", [None, ""])
def test_missing_container_renders_nothing(render, raw) -> None:
    assert render(raw) == []


def test_json_ld_renders_compact_script() -> None:
    elements = render_meta_json_ld(SEOMATIC["metaJsonLdContainer"])
    assert len(elements) == 1
    script = elements[0]
    assert script.tag == "script"
    assert script.key == JSON_LD_KEY
    assert script.attrs == {"type": "application/ld+json"}
    assert script.inner_html == '{"@context":"http://schema.org","@type":"WebPage","name":"Home"}'


@pytest.mark.parametrize(
    "raw",
    [
        '{"mainEntityOfPage": null}',
        '{"mainEntityOfPage": ""}',
        '{"mainEntityOfPage": 0}',
        '{"other": {"@type": "WebPage"}}',
        "null",
        "[1, 2]",
    ],
)
def test_json_ld_without_main_entity_renders_nothing(raw) -> None:
    assert render_meta_json_ld(raw) == []


def test_json_ld_empty_object_is_still_rendered() -> None:
    elements = render_meta_json_ld('{"mainEntityOfPage": {}}')
    assert [element.inner_html for element in elements] == ["{}"]


def test_json_ld_keeps_unicode_unless_configured(monkeypatch) -> None:
    raw = json.dumps({"mainEntityOfPage": {"name": "Café"}})
    assert render_meta_json_ld(raw)[0].inner_html == '{"name":"Café"}'

    monkeypatch.setenv("SEOMATIC_JSON_LD_ENSURE_ASCII", "true")
    config.refresh_settings()
    assert render_meta_json_ld(raw)[0].inner_html == '{"name":"Caf\\u00e9"}'


def test_links_render_one_element_per_record() -> None:
    elements = render_meta_links(SEOMATIC["metaLinkContainer"])
    assert [element.key for element in elements] == ["canonical", "alternate0", "alternate1"]
    assert all(element.tag == "link" for element in elements)
    assert elements[2].attrs == {
        "href": "https://example.com/de/",
        "hreflang": "de",
        "rel": "alternate",
    }


def test_tags_render_meta_elements() -> None:
    elements = render_meta_tags(SEOMATIC["metaTagContainer"])
    assert elements == [
        Element(tag="meta", attrs={"content": "Welcome", "name": "description"}, key="description")
    ]


def test_scripts_render_head_scripts_only_for_script_field() -> None:
    elements = render_meta_scripts(SEOMATIC["metaScriptContainer"])
    assert [(element.key, element.inner_html) for element in elements] == [
        ("gtag", "window.dataLayer = [];"),
        ("fbq", "fbq('init');"),
    ]
    assert all(element.tag == "script" and element.attrs == {} for element in elements)


def test_single_head_script_has_no_body_element() -> None:
    raw = '{"ga":{"script":"console.log(1)"}}'
    assert render_meta_scripts(raw) == [Element(tag="script", key="ga", inner_html="console.log(1)")]
    assert render_meta_body_scripts(raw) == []


def test_body_scripts_render_hidden_containers() -> None:
    elements = render_meta_body_scripts(SEOMATIC["metaScriptContainer"])
    assert [element.key for element in elements] == ["gtag", "gtm"]
    assert all(element.tag == "div" for element in elements)
    assert all(element.attrs == {"style": BODY_SCRIPT_STYLE} for element in elements)
    assert elements[0].inner_html == "<noscript>gtag</noscript>"


def test_scripts_skip_entries_with_unexpected_shape() -> None:
    raw = json.dumps(
        {
            "empty": None,
            "text": "console.log(1)",
            "list": [{"script": "a"}],
            "blank": {"script": "", "bodyScript": ""},
            "ok": {"script": "ok()", "position": 1},
        }
    )
    assert [element.key for element in render_meta_scripts(raw)] == ["ok"]
    assert render_meta_body_scripts(raw) == []


def test_title_renders_text() -> None:
    elements = render_meta_title('{"title":{"title":"Home"}}')
    assert elements == [Element(tag="title", text="Home")]


@pytest.mark.parametrize(
    "raw",
    [
        '{"title":{"title":""}}',
        '{"title":{"title":null}}',
        '{"title":{}}',
        '{"title":null}',
        '{"title":"Home"}',
        "{}",
        "null",
    ],
)
def test_title_shape_violations_render_nothing(raw) -> None:
    assert render_meta_title(raw) == []


def test_malformed_json_raises_decode_error() -> None:
    with pytest.raises(ContainerDecodeError) as excinfo:
        render_meta_links("{not json")
    error = excinfo.value
    assert error.container == "metaLinkContainer"
    assert error.error_type == "container_decode"
    assert isinstance(error, ValueError)
    assert isinstance(error.__cause__, json.JSONDecodeError)
    assert error.trace_id in error.with_trace()


def test_malformed_container_aborts_whole_head_render() -> None:
    broken = dict(SEOMATIC, metaTagContainer="{")
    with pytest.raises(ContainerDecodeError):
        render_head(broken)


def test_render_head_orders_categories() -> None:
    tags = [element.tag for element in render_head(SEOMATIC)]
    assert tags == ["script", "link", "link", "link", "script", "script", "meta", "title"]


def test_render_body_uses_script_container() -> None:
    assert render_body(SEOMATIC) == render_meta_body_scripts(SEOMATIC["metaScriptContainer"])


def test_render_seomatic_is_head_then_body() -> None:
    elements = render_seomatic(SEOMATIC)
    assert elements == [*render_head(SEOMATIC), *render_body(SEOMATIC)]


def test_render_seomatic_with_nothing() -> None:
    assert render_seomatic(None) == []
    assert render_seomatic({}) == []


def test_render_is_idempotent() -> None:
    assert render_seomatic(SEOMATIC) == render_seomatic(SEOMATIC)
    for raw in SEOMATIC.values():
        assert render_meta_links(raw) == render_meta_links(raw)


def test_script_fields_are_read_independently() -> None:
    raw = '{"a":{"script":{"bad":1},"bodyScript":"<b></b>"},"b":{"script":1,"bodyScript":false}}'
    assert render_meta_body_scripts(raw) == [
        Element(tag="div", attrs={"style": BODY_SCRIPT_STYLE}, key="a", inner_html="<b></b>")
    ]
    assert render_meta_scripts(raw) == [Element(tag="script", key="b", inner_html="1")]


def test_numeric_title_is_rendered_as_text() -> None:
    assert render_meta_title('{"title":{"title":2024}}') == [Element(tag="title", text="2024")]
    assert render_meta_title('{"title":{"title":2024.0}}') == [Element(tag="title", text="2024")]
    assert render_meta_title('{"title":{"title":0}}') == []
    assert render_meta_title('{"title":{"title":true}}') == []
