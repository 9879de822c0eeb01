"""Normalization of SEOmatic tag containers.

A container maps keys to either one attribute-set or a list of them::

    {"canonical": {"rel": "canonical", "href": "/"},
     "alternate": [{"hreflang": "en"}, {"hreflang": "de"}]}

``normalize`` flattens it into keyed records, one per tag.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Single:
    attributes: Mapping[str, Any]


@dataclass(frozen=True)
class Many:
    items: Sequence[Any]


ContainerValue = Union[Single, Many]


def is_truthy(value: Any) -> bool:
    """JavaScript truthiness: empty lists and objects count as present."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def classify(value: Any) -> Optional[ContainerValue]:
    if isinstance(value, list):
        return Many(items=value)
    if isinstance(value, Mapping):
        return Single(attributes=value)
    return None


def _record(key: str, attributes: Mapping[str, Any]) -> Dict[str, Any]:
    # Source attributes win over the generated key.
    return {"key": key, **attributes}


def normalize(container: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    if not container:
        return []

    records: List[Dict[str, Any]] = []
    for key, value in container.items():
        if not is_truthy(key) or not is_truthy(value):
            logger.debug("Skipping empty container entry %r", key)
            continue

        classified = classify(value)
        if classified is None:
            logger.debug("Skipping container entry %r: not an attribute-set", key)
            continue

        if isinstance(classified, Single):
            records.append(_record(key, classified.attributes))
            continue

        for index, item in enumerate(classified.items):
            if not isinstance(item, Mapping):
                logger.debug("Skipping %s[%d]: not an attribute-set", key, index)
                continue
            records.append(_record(f"{key}{index}", item))

    return records


__all__ = ["ContainerValue", "Many", "Single", "classify", "is_truthy", "normalize"]
