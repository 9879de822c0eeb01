from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from .config import get_settings, update_runtime_overrides
from .exceptions import ContainerDecodeError
from .log import log_render, setup_logging
from .renderer import render_body, render_head, to_html
from .schemas import CONTAINER_FIELDS, SeomaticData

logger = logging.getLogger(__name__)

_SNAKE_FIELDS = tuple(SeomaticData.model_fields)


def _looks_like_seomatic(value: Any) -> bool:
    if not isinstance(value, dict):
        return False
    return any(name in value for name in (*CONTAINER_FIELDS, *_SNAKE_FIELDS))


def find_seomatic(payload: Any) -> Optional[dict]:
    """Return the first object holding a meta container, depth first."""
    if _looks_like_seomatic(payload):
        return payload
    if isinstance(payload, dict):
        children = payload.values()
    elif isinstance(payload, list):
        children = payload
    else:
        return None
    for child in children:
        found = find_seomatic(child)
        if found is not None:
            return found
    return None


def resolve_path(payload: Any, dotted: str) -> Any:
    current = payload
    for part in dotted.split("."):
        if isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        elif isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current


def render_part(seomatic: SeomaticData, part: str, *, pretty: bool) -> str:
    head = render_head(seomatic) if part in {"head", "all"} else []
    body = render_body(seomatic) if part in {"body", "all"} else []
    log_render(part, len(head), len(body))
    return to_html([*head, *body], pretty=pretty)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render SEOmatic meta containers as HTML.")
    parser.add_argument("path", help="Path to a JSON file with the seomatic object or a GraphQL response")
    parser.add_argument(
        "--path",
        dest="lookup",
        default=None,
        help="Dotted path to the seomatic object, e.g. data.entry.seomatic",
    )
    parser.add_argument(
        "--part",
        choices=("head", "body", "all"),
        default="all",
        help="Which tags to render",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=None,
        help="Put each top-level tag on its own line",
    )
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG")
    args = parser.parse_args(argv)

    update_runtime_overrides({"pretty": args.pretty, "log_level": args.log_level})
    settings = get_settings()
    setup_logging(
        log_dir=Path(settings.log_dir) if settings.log_dir else None,
        level=settings.log_level.upper(),
    )

    target = Path(args.path)
    if not target.exists() or not target.is_file():
        raise SystemExit(f"File not found: {target}")

    try:
        payload = json.loads(target.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {target}: {exc.msg} (line {exc.lineno})") from exc

    raw = resolve_path(payload, args.lookup) if args.lookup else find_seomatic(payload)
    if not isinstance(raw, dict):
        raise SystemExit(f"No seomatic object found in {target}")

    try:
        seomatic = SeomaticData.model_validate(raw)
    except ValidationError as exc:
        fields = ", ".join(str(error["loc"][0]) for error in exc.errors() if error.get("loc"))
        raise SystemExit(f"Invalid seomatic object in {target}: containers must be JSON strings ({fields})") from exc

    try:
        output = render_part(seomatic, args.part, pretty=settings.pretty)
    except ContainerDecodeError as exc:
        logger.error(
            "render_failed",
            extra={"data": {"container": exc.container, "trace_id": exc.trace_id}},
        )
        print(exc.with_trace(), file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
