from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


CONTAINER_FIELDS = (
    "metaJsonLdContainer",
    "metaLinkContainer",
    "metaScriptContainer",
    "metaTagContainer",
    "metaTitleContainer",
)


def _coerce_text(value: Any) -> Optional[str]:
    """Strings pass through, non-zero numbers become text, anything else is absent."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value == 0 or math.isnan(value):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


class SeomaticData(BaseModel):
    """The ``seomatic`` object returned by the CMS GraphQL API.

    Every container is a JSON-encoded string, or missing.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    meta_json_ld_container: Optional[str] = Field(default=None, alias="metaJsonLdContainer")
    meta_link_container: Optional[str] = Field(default=None, alias="metaLinkContainer")
    meta_script_container: Optional[str] = Field(default=None, alias="metaScriptContainer")
    meta_tag_container: Optional[str] = Field(default=None, alias="metaTagContainer")
    meta_title_container: Optional[str] = Field(default=None, alias="metaTitleContainer")

    @classmethod
    def coerce(cls, data: "SeomaticData | Mapping[str, Any] | None") -> "SeomaticData":
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        return cls.model_validate(dict(data))


class ScriptEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    script: Optional[str] = None
    body_script: Optional[str] = Field(default=None, alias="bodyScript")

    @field_validator("script", "body_script", mode="before")
    @classmethod
    def _coerce_markup(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)


class TitleTag(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)


class TitleContainer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[TitleTag] = None


__all__ = [
    "CONTAINER_FIELDS",
    "SeomaticData",
    "ScriptEntry",
    "TitleContainer",
    "TitleTag",
]
