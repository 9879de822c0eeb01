from .seomatic import (
    CONTAINER_FIELDS,
    ScriptEntry,
    SeomaticData,
    TitleContainer,
    TitleTag,
)

__all__ = [
    "CONTAINER_FIELDS",
    "ScriptEntry",
    "SeomaticData",
    "TitleContainer",
    "TitleTag",
]
