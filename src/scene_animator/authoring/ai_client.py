"""HTTP client for the language model that turns free text into a content analysis."""

import json
import logging
import os
from typing import Any

import httpx

from .analysis import (
    AnalysisAPIError,
    AnalysisError,
    AnalysisFormatError,
    ContentAnalysis,
    extract_json,
    parse_analysis,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.anthropic.com/v1/messages"
DEFAULT_MODEL = "claude-3-5-sonnet-latest"
ANTHROPIC_VERSION = "2023-06-01"

ANALYSIS_PROMPT = """Analyze this text and extract exactly:

1. MAIN TITLE (at most 6 words, punchy)
2. MAIN IDEAS (exactly 3-5 concise bullets)
3. KEY CONCEPTS (6-8 important words or phrases)
4. RELATIONS between concepts (what connects to what)
5. SUGGESTED STRUCTURE (timeline / mind map / presentation)

Text: "{text}"

Answer ONLY with valid JSON:
{{
  "title": "string",
  "mainIdeas": ["string", "string", "string"],
  "keyConcepts": ["string", "string"],
  "connections": [{{"from": "concept1", "to": "concept2", "relation": "cause"}}],
  "suggestedStructure": "presentation|mindmap|timeline",
  "reasoning": "Why this structure"
}}"""

DESIGN_PROMPT = """Based on this analysis, design a visualization for a 1200x800 canvas:

Analysis: {analysis}

Answer ONLY with a specific design as valid JSON:
{{
  "layout": "radial|linear|hierarchical",
  "elements": [
    {{
      "type": "text|circle|line",
      "content": "string",
      "position": {{"x": number, "y": number}},
      "color": "#58C4DD|#FF6B6B|#51CF66|#FFFF00|#9775FA",
      "size": number,
      "animationStart": number,
      "animationDuration": number,
      "effect": "typewriter|grow|slide|fade"
    }}
  ],
  "connections": [
    {{
      "from": {{"x": number, "y": number}},
      "to": {{"x": number, "y": number}},
      "style": "straight|curved",
      "color": "#hexcode",
      "timing": number
    }}
  ]
}}"""


class AnalysisClient:
    """Calls the Anthropic Messages API for content analyses and visual designs."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        api_url: str | None = None,
        timeout: float = 30.0,
        max_tokens: int = 4000,
        temperature: float = 0.7,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key or os.getenv("CLAUDE_API_KEY")
        self.model = model or os.getenv("SCENE_ANIMATOR_MODEL", DEFAULT_MODEL)
        self.api_url = api_url or os.getenv("SCENE_ANIMATOR_API_URL", DEFAULT_API_URL)
        self.timeout = float(os.getenv("SCENE_ANIMATOR_TIMEOUT", timeout))
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = httpx.Client(timeout=self.timeout, transport=transport)

    def analyze(self, text: str) -> ContentAnalysis:
        """
        Extract a title, ideas and concepts from free text.

        Raises:
            AnalysisAPIError: If the API is unreachable, unconfigured or returns an error status
            AnalysisFormatError: If the reply is not a valid analysis
        """
        if not text.strip():
            raise AnalysisFormatError("Text to analyze is empty")
        reply = self._complete(ANALYSIS_PROMPT.format(text=text), self.max_tokens)
        return parse_analysis(extract_json(reply))

    def design(self, analysis: ContentAnalysis) -> dict[str, Any]:
        """
        Ask for a visual design with explicit element positions and timings.

        The returned payload is meant for ``build_scene_from_design``.

        Raises:
            AnalysisAPIError: If the API is unreachable, unconfigured or returns an error status
            AnalysisFormatError: If the reply is not a JSON object
        """
        prompt = DESIGN_PROMPT.format(analysis=json.dumps(analysis.to_payload()))
        payload = extract_json(self._complete(prompt, self.max_tokens))
        if not isinstance(payload, dict):
            raise AnalysisFormatError("Design must be a JSON object")
        return payload

    def check_connection(self) -> tuple[bool, str]:
        """Send a minimal request and report whether the API accepted it."""
        try:
            self._complete("Test connection", max_tokens=10)
        except AnalysisError as e:
            return False, str(e)
        return True, "Connected to Claude API successfully"

    def close(self) -> None:
        self._client.close()

    def _complete(self, prompt: str, max_tokens: int) -> str:
        if not self.api_key:
            raise AnalysisAPIError(
                "Claude API key not configured. "
                "Set your API key in the CLAUDE_API_KEY environment variable."
            )

        payload = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        try:
            resp = self._client.post(self.api_url, json=payload, headers=headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Claude API returned %s", e.response.status_code)
            raise AnalysisAPIError(
                f"API Error: {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Claude API request failed: %s", e)
            raise AnalysisAPIError(f"Failed to reach Claude API: {e}") from e

        try:
            text = resp.json()["content"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AnalysisFormatError("Unexpected response shape from Claude API") from e
        if not isinstance(text, str):
            raise AnalysisFormatError("Unexpected response shape from Claude API")
        return text
