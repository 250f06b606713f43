"""Strict JSON parsing of model output into an explicit success/failure value."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParsedJson:
    value: Any


@dataclass(frozen=True)
class ParseFailure:
    reason: str


JsonParseResult = ParsedJson | ParseFailure


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def strip_code_fences(raw: str) -> str:
    """Remove surrounding whitespace and a single Markdown code fence."""
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines).strip()
    return cleaned


def parse_json(raw: str) -> JsonParseResult:
    """Parse *raw* as RFC 8259 JSON. ``NaN`` and ``Infinity`` are rejected."""
    cleaned = strip_code_fences(raw)
    if not cleaned:
        return ParseFailure("Empty response")
    try:
        return ParsedJson(json.loads(cleaned, parse_constant=_reject_constant))
    except ValueError as exc:
        return ParseFailure(f"Invalid JSON response: {exc}")
    except RecursionError:
        return ParseFailure("JSON response is nested too deeply")
