"""Structured content analysis returned by the language-model collaborator."""

import json
import re
from dataclasses import dataclass
from typing import Any

STRUCTURES = ("presentation", "mindmap", "timeline")

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class AnalysisError(Exception):
    """Base exception for collaborator failures, carrying a user-facing message."""


class AnalysisAPIError(AnalysisError):
    """The collaborator could not be reached or refused the request."""


class AnalysisFormatError(AnalysisError):
    """The collaborator answered with data that is not a usable analysis."""


@dataclass(frozen=True)
class Connection:
    source: str
    target: str
    relation: str = ""


@dataclass(frozen=True)
class ContentAnalysis:
    """Title, ideas and concepts extracted from free text."""

    title: str
    main_ideas: tuple[str, ...] = ()
    key_concepts: tuple[str, ...] = ()
    suggested_structure: str = "presentation"
    connections: tuple[Connection, ...] = ()
    reasoning: str = ""

    def to_payload(self) -> dict[str, Any]:
        """camelCase form, as exchanged with the collaborator."""
        return {
            "title": self.title,
            "mainIdeas": list(self.main_ideas),
            "keyConcepts": list(self.key_concepts),
            "connections": [
                {"from": c.source, "to": c.target, "relation": c.relation}
                for c in self.connections
            ],
            "suggestedStructure": self.suggested_structure,
            "reasoning": self.reasoning,
        }


def extract_json(text: str) -> Any:
    """
    Decode the JSON object embedded in a model reply.

    Tolerates Markdown code fences and prose around the object.

    Raises:
        AnalysisFormatError: If no JSON object can be decoded
    """
    cleaned = _FENCE.sub("", text.strip())
    start, end = cleaned.find("{"), cleaned.rfind("}")
    if start == -1 or end <= start:
        raise AnalysisFormatError("Response did not contain a JSON object")
    try:
        return json.loads(cleaned[start : end + 1])
    except json.JSONDecodeError as e:
        raise AnalysisFormatError(f"Response contained invalid JSON: {e}") from e


def parse_analysis(payload: Any) -> ContentAnalysis:
    """
    Validate a camelCase analysis payload.

    Raises:
        AnalysisFormatError: If a required field is missing or has the wrong type
    """
    if not isinstance(payload, dict):
        raise AnalysisFormatError("Analysis must be a JSON object")

    title = payload.get("title")
    if not isinstance(title, str) or not title.strip():
        raise AnalysisFormatError("Analysis is missing a title")

    structure = payload.get("suggestedStructure") or "presentation"
    if structure not in STRUCTURES:
        raise AnalysisFormatError(
            f"Unknown suggested structure '{structure}'. Available: {', '.join(STRUCTURES)}"
        )

    reasoning = payload.get("reasoning") or ""
    return ContentAnalysis(
        title=title.strip(),
        main_ideas=_strings(payload, "mainIdeas"),
        key_concepts=_strings(payload, "keyConcepts"),
        suggested_structure=structure,
        connections=_connections(payload.get("connections")),
        reasoning=reasoning if isinstance(reasoning, str) else "",
    )


def _strings(payload: dict[str, Any], key: str) -> tuple[str, ...]:
    value = payload.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise AnalysisFormatError(f"Analysis field '{key}' must be a list of strings")
    return tuple(item.strip() for item in value if item.strip())


def _connections(value: Any) -> tuple[Connection, ...]:
    if not isinstance(value, list):
        return ()
    connections = []
    for item in value:
        # Partial connections are common in model output; skip rather than fail.
        if not isinstance(item, dict):
            continue
        source, target = item.get("from"), item.get("to")
        if isinstance(source, str) and isinstance(target, str):
            connections.append(Connection(source, target, str(item.get("relation") or "")))
    return tuple(connections)
