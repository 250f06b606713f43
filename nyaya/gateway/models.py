from dataclasses import dataclass


@dataclass(frozen=True)
class ModelRequest:
    """A single generation request. Built fresh per call."""

    prompt_text: str
    max_tokens: int
    temperature: float


@dataclass(frozen=True)
class ModelResponse:
    raw_text: str
