from dataclasses import fields, is_dataclass
from typing import Any, cast

from nyaya.analysis.models import AnalysisResult


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_payload(result: AnalysisResult) -> dict[str, Any]:
    """Convert a result record into a JSON-ready dict with camelCase keys.

    Only dataclass field names are renamed; keys of free-form maps (language
    names) are kept as they are.
    """
    return cast(dict[str, Any], _convert(result))


def _convert(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {camel_case(f.name): _convert(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {key: _convert(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    return value
