"""Timed visual primitives that make up a scene."""

from typing import Any, Mapping

from .bullet import BulletElement
from .circle import CircleElement
from .element import SceneElement, SceneValidationError, check_color
from .line import LineElement
from .text import TextElement

ELEMENT_TYPES: dict[str, type[SceneElement]] = {
    "text": TextElement,
    "bullet": BulletElement,
    "circle": CircleElement,
    "line": LineElement,
}


def supported_element_kinds() -> tuple[str, ...]:
    """Return supported element kinds in deterministic order."""
    return tuple(ELEMENT_TYPES.keys())


def element_from_dict(payload: Mapping[str, Any]) -> SceneElement:
    """
    Build an element from a design-style mapping.

    Accepts ``type``, ``content``, ``position: {x, y}`` (or ``from``/``to``
    points for lines), ``color``, ``size``, ``radius``, ``animationStart``
    and ``animationDuration`` in milliseconds.

    Raises:
        SceneValidationError: If the payload is not a mapping, the kind is
            unknown, or geometry is missing or malformed
    """
    if not isinstance(payload, Mapping):
        raise SceneValidationError(f"Element must be an object (got {payload!r})")
    kind = payload.get("type")
    element_class = ELEMENT_TYPES.get(kind) if isinstance(kind, str) else None
    if element_class is None:
        available = ", ".join(supported_element_kinds())
        raise SceneValidationError(f"Unknown element type '{kind}'. Available: {available}")

    kwargs: dict[str, Any] = {}
    for source, target in (
        ("color", "color"),
        ("size", "size"),
        ("animationStart", "start_offset_ms"),
        ("animationDuration", "reveal_duration_ms"),
    ):
        if payload.get(source) is not None:
            kwargs[target] = payload[source] if target == "color" else _number(payload, source)

    content = payload.get("content")
    if element_class is LineElement:
        start = _point(payload, "from")
        end = _point(payload, "to")
        kwargs.update(
            x1=_number(start, "x"),
            y1=_number(start, "y"),
            x2=_number(end, "x"),
            y2=_number(end, "y"),
        )
    else:
        position = _point(payload, "position")
        kwargs.update(x=_number(position, "x"), y=_number(position, "y"))
        if element_class is CircleElement:
            # Design payloads size circles with ``size`` when no radius is given.
            radius_key = "radius" if payload.get("radius") is not None else "size"
            kwargs.update(radius=_number(payload, radius_key), label_text=content or None)
        else:
            kwargs.update(text=content)
            if payload.get("align") is not None:
                kwargs["align"] = payload["align"]

    return element_class(**kwargs)


def _point(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SceneValidationError(f"Field '{key}' must be an object with x and y (got {value!r})")
    return value


def _number(source: Mapping[str, Any], key: str) -> float | None:
    value = source.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise SceneValidationError(f"Field '{key}' must be a number (got {value!r})")


__all__ = [
    "SceneElement",
    "SceneValidationError",
    "check_color",
    "TextElement",
    "BulletElement",
    "CircleElement",
    "LineElement",
    "ELEMENT_TYPES",
    "supported_element_kinds",
    "element_from_dict",
]
