"""Builds typed task results from parsed model JSON.

Missing fields take neutral defaults. Fields that are present but have the
wrong JSON type, and enumerated values outside their domain, raise
SchemaMismatchError so the caller can fall back.
"""

import math
from collections.abc import Callable
from typing import Any, TypeVar

from nyaya.analysis.exceptions import SchemaMismatchError
from nyaya.analysis.models import (
    AnalysisResult,
    BailAmount,
    BailDocumentResult,
    BailRiskAssessment,
    ClauseSummary,
    ClauseTag,
    ClauseTaggingResult,
    CourtInfo,
    DefendantInfo,
    DocumentAnalysisResult,
    DocumentClauseTag,
    ImportantDate,
    LegalAdviceResult,
    MultilingualResult,
    RedFlag,
    RedFlagResult,
    RiskAssessment,
    SimplifyResult,
    StatuteLink,
    StatuteLinkingResult,
    StatuteSummary,
    Surety,
    TaggedClause,
    TranslationResult,
    VoiceResult,
)
from nyaya.analysis.tasks import TaskKind

RISK_LEVELS = frozenset({"high", "medium", "low"})

T = TypeVar("T")


def build_result(kind: TaskKind, data: Any) -> AnalysisResult:
    """Validate parsed JSON for *kind* and build its canonical result.

    Raises:
        SchemaMismatchError: if the JSON does not fit the task's schema.
    """
    return _BUILDERS[kind](data)


# ----------------------------------------------------------------------
# Task builders
# ----------------------------------------------------------------------


def build_document_analysis(data: Any) -> DocumentAnalysisResult:
    obj = _require_object(data, "result")
    risk = _optional_object(obj, "riskAssessment", "result")
    return DocumentAnalysisResult(
        red_flags=_record_list(obj, "redFlags", "result", _build_red_flag),
        clause_tags=_record_list(obj, "clauseTags", "result", _build_document_clause_tag),
        statute_links=_record_list(obj, "statuteLinks", "result", _build_statute_link),
        risk_assessment=RiskAssessment(
            overall_risk=_enum(risk, "overallRisk", "riskAssessment"),
            score=_score(risk, "score", "riskAssessment"),
            concerns=_str_list(risk, "concerns", "riskAssessment"),
        ),
        simplified_summary=_str(obj, "simplifiedSummary", "result"),
        multilingual_summary=_str_map(obj, "multilingualSummary", "result"),
        recommendations=_str_list(obj, "recommendations", "result"),
    )


def build_red_flags(data: Any) -> RedFlagResult:
    if isinstance(data, dict) and "redFlags" in data:
        data = data["redFlags"]
    if not isinstance(data, list):
        raise SchemaMismatchError("'redFlags' must be a list")
    return RedFlagResult(red_flags=_build_records(data, "redFlags", _build_red_flag))


def build_clause_tagging(data: Any) -> ClauseTaggingResult:
    obj = _require_object(data, "result")
    tags = _record_list(obj, "clauseTags", "result", _build_clause_tag)
    if "summary" in obj and obj["summary"] is not None:
        raw = _require_object(obj["summary"], "summary")
        summary = ClauseSummary(
            total_clauses=_int(raw, "totalClauses", "summary"),
            high_risk_clauses=_int(raw, "highRiskClauses", "summary"),
            categories=_str_list(raw, "categories", "summary"),
        )
    else:
        clauses = [clause for tag in tags for clause in tag.clauses]
        summary = ClauseSummary(
            total_clauses=len(clauses),
            high_risk_clauses=sum(1 for c in clauses if c.risk_level == "high"),
            categories=[tag.category for tag in tags],
        )
    return ClauseTaggingResult(clause_tags=tags, summary=summary)


def build_statute_linking(data: Any) -> StatuteLinkingResult:
    obj = _require_object(data, "result")
    links = _record_list(obj, "statuteLinks", "result", _build_statute_link)
    if "summary" in obj and obj["summary"] is not None:
        raw = _require_object(obj["summary"], "summary")
        summary = StatuteSummary(
            total_links=_int(raw, "totalLinks", "summary"),
            high_risk_links=_int(raw, "highRiskLinks", "summary"),
            statutes=_str_list(raw, "statutes", "summary"),
        )
    else:
        summary = StatuteSummary(
            total_links=len(links),
            high_risk_links=sum(1 for link in links if link.risk_level == "high"),
            statutes=list(dict.fromkeys(link.statute for link in links if link.statute)),
        )
    return StatuteLinkingResult(statute_links=links, summary=summary)


def build_multilingual(data: Any) -> MultilingualResult:
    obj = _require_object(data, "result")
    return MultilingualResult(
        summaries=_str_map(obj, "summaries", "result"),
        key_points=_str_list_map(obj, "keyPoints", "result"),
        warnings=_str_list_map(obj, "warnings", "result"),
    )


def build_bail_document(data: Any) -> BailDocumentResult:
    obj = _require_object(data, "result")
    defendant = _optional_object(obj, "defendantInfo", "result")
    court = _optional_object(obj, "courtInfo", "result")
    risk = _optional_object(obj, "riskAssessment", "result")
    return BailDocumentResult(
        document_type=_str(obj, "documentType", "result") or "Bail Document",
        defendant_info=DefendantInfo(
            name=_str(defendant, "name", "defendantInfo"),
            age=_str(defendant, "age", "defendantInfo"),
            address=_str(defendant, "address", "defendantInfo"),
        ),
        bail_amount=_build_bail_amount(obj.get("bailAmount")),
        surety_info=_build_sureties(obj.get("suretyInfo")),
        court_info=CourtInfo(
            name=_str(court, "name", "courtInfo"),
            location=_str(court, "location", "courtInfo"),
            case_number=_str(court, "caseNumber", "courtInfo"),
        ),
        important_dates=_build_dates(obj.get("importantDates")),
        conditions=_str_list(obj, "conditions", "result"),
        risk_assessment=BailRiskAssessment(
            level=_enum(risk, "level", "riskAssessment"),
            factors=_str_list(risk, "factors", "riskAssessment"),
        ),
        compliance_requirements=_str_list(obj, "complianceRequirements", "result"),
        next_steps=_str_list(obj, "nextSteps", "result"),
        analysis=_str(obj, "analysis", "result"),
    )


def _text_builder(key: str, result_cls: Callable[[str], T]) -> Callable[[Any], T]:
    def build(data: Any) -> T:
        if isinstance(data, str):
            return result_cls(data)
        obj = _require_object(data, "result")
        if key not in obj:
            raise SchemaMismatchError(f"Missing required field: {key}")
        return result_cls(_str(obj, key, "result"))

    return build


# ----------------------------------------------------------------------
# Record builders
# ----------------------------------------------------------------------


def _build_red_flag(raw: dict[str, Any], path: str) -> RedFlag:
    flag_type = _str(raw, "type", path)
    if not flag_type:
        raise SchemaMismatchError(f"{path}: 'type' must be a non-empty string")
    if "severity" not in raw:
        raise SchemaMismatchError(f"{path}: 'severity' is required")
    return RedFlag(
        type=flag_type,
        severity=_enum(raw, "severity", path),
        description=_str(raw, "description", path),
        location=_str(raw, "location", path),
        recommendation=_str(raw, "recommendation", path),
        indian_law_reference=_str(raw, "indianLawReference", path),
    )


def _build_document_clause_tag(raw: dict[str, Any], path: str) -> DocumentClauseTag:
    return DocumentClauseTag(
        category=_str(raw, "category", path),
        clauses=_str_list(raw, "clauses", path),
        risk_level=_enum(raw, "riskLevel", path),
    )


def _build_clause_tag(raw: dict[str, Any], path: str) -> ClauseTag:
    items = raw.get("clauses")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise SchemaMismatchError(f"{path}: 'clauses' must be a list")
    clauses = []
    for i, item in enumerate(items):
        if isinstance(item, str):
            clauses.append(TaggedClause(text=item))
            continue
        item_path = f"{path}.clauses[{i}]"
        obj = _require_object(item, item_path)
        clauses.append(
            TaggedClause(
                text=_str(obj, "text", item_path),
                risk_level=_enum(obj, "riskLevel", item_path),
                description=_str(obj, "description", item_path),
                recommendation=_str(obj, "recommendation", item_path),
            )
        )
    return ClauseTag(category=_str(raw, "category", path), clauses=clauses)


def _build_statute_link(raw: dict[str, Any], path: str) -> StatuteLink:
    return StatuteLink(
        clause=_str(raw, "clause", path),
        statute=_str(raw, "statute", path),
        precedent=_str(raw, "precedent", path),
        explanation=_str(raw, "explanation", path),
        implications=_str(raw, "implications", path),
        risk_level=_enum(raw, "riskLevel", path),
    )


def _build_bail_amount(raw: Any) -> BailAmount:
    if raw is None:
        return BailAmount()
    if isinstance(raw, (str, int, float)) and not isinstance(raw, bool):
        return BailAmount(amount=str(raw))
    obj = _require_object(raw, "bailAmount")
    return BailAmount(
        amount=_str(obj, "amount", "bailAmount"),
        currency=_str(obj, "currency", "bailAmount") or "INR",
    )


def _build_sureties(raw: Any) -> list[Surety]:
    if raw is None:
        return []
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        raise SchemaMismatchError("'suretyInfo' must be a list or an object")
    return _build_records(raw, "suretyInfo", _build_surety)


def _build_surety(raw: dict[str, Any], path: str) -> Surety:
    return Surety(
        name=_str(raw, "name", path),
        relationship=_str(raw, "relationship", path),
        address=_str(raw, "address", path),
        amount=_str(raw, "amount", path),
    )


def _build_dates(raw: Any) -> list[ImportantDate]:
    if raw is None:
        return []
    if isinstance(raw, dict):
        return [ImportantDate(event=str(k), date=_scalar_str(v, f"importantDates.{k}"))
                for k, v in raw.items()]
    if not isinstance(raw, list):
        raise SchemaMismatchError("'importantDates' must be a list or an object")
    return _build_records(
        raw,
        "importantDates",
        lambda item, path: ImportantDate(
            event=_str(item, "event", path), date=_str(item, "date", path)
        ),
    )


# ----------------------------------------------------------------------
# Field helpers
# ----------------------------------------------------------------------


def _require_object(raw: Any, path: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise SchemaMismatchError(f"'{path}' must be an object")
    return raw


def _optional_object(data: dict[str, Any], key: str, path: str) -> dict[str, Any]:
    raw = data.get(key)
    if raw is None:
        return {}
    return _require_object(raw, f"{path}.{key}")


def _scalar_str(raw: Any, path: str) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bool):
        raise SchemaMismatchError(f"'{path}' must be a string")
    if isinstance(raw, (str, int, float)):
        return str(raw)
    raise SchemaMismatchError(f"'{path}' must be a string")


def _str(data: dict[str, Any], key: str, path: str) -> str:
    return _scalar_str(data.get(key), f"{path}.{key}")


def _int(data: dict[str, Any], key: str, path: str, default: int = 0) -> int:
    raw = data.get(key)
    if raw is None:
        return default
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SchemaMismatchError(f"'{path}.{key}' must be a number")
    if isinstance(raw, float) and not math.isfinite(raw):
        raise SchemaMismatchError(f"'{path}.{key}' must be a finite number, got {raw!r}")
    return int(raw)


def _score(data: dict[str, Any], key: str, path: str) -> int:
    score = _int(data, key, path, default=50)
    if not 0 <= score <= 100:
        raise SchemaMismatchError(f"'{path}.{key}' must be between 0 and 100, got {score}")
    return score


def _enum(data: dict[str, Any], key: str, path: str, default: str = "medium") -> str:
    raw = data.get(key)
    if raw is None:
        return default
    if not isinstance(raw, str) or raw.strip().lower() not in RISK_LEVELS:
        raise SchemaMismatchError(
            f"'{path}.{key}' must be one of {sorted(RISK_LEVELS)}, got {raw!r}"
        )
    return raw.strip().lower()


def _str_list(data: dict[str, Any], key: str, path: str) -> list[str]:
    raw = data.get(key)
    if raw is None:
        return []
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list):
        raise SchemaMismatchError(f"'{path}.{key}' must be a list")
    return [_scalar_str(item, f"{path}.{key}[{i}]") for i, item in enumerate(raw)]


def _str_map(data: dict[str, Any], key: str, path: str) -> dict[str, str]:
    raw = _optional_object(data, key, path)
    return {str(k): _scalar_str(v, f"{path}.{key}.{k}") for k, v in raw.items()}


def _str_list_map(data: dict[str, Any], key: str, path: str) -> dict[str, list[str]]:
    raw = _optional_object(data, key, path)
    return {str(k): _str_list(raw, k, f"{path}.{key}") for k in raw}


def _record_list(
    data: dict[str, Any],
    key: str,
    path: str,
    builder: Callable[[dict[str, Any], str], T],
) -> list[T]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SchemaMismatchError(f"'{path}.{key}' must be a list")
    return _build_records(raw, key, builder)


def _build_records(
    items: list[Any],
    path: str,
    builder: Callable[[dict[str, Any], str], T],
) -> list[T]:
    records = []
    for i, item in enumerate(items):
        item_path = f"{path}[{i}]"
        records.append(builder(_require_object(item, item_path), item_path))
    return records


_BUILDERS: dict[TaskKind, Callable[[Any], AnalysisResult]] = {
    TaskKind.DOCUMENT_ANALYSIS: build_document_analysis,
    TaskKind.SIMPLIFY: _text_builder("simplifiedText", SimplifyResult),
    TaskKind.RED_FLAG_DETECTION: build_red_flags,
    TaskKind.CLAUSE_TAGGING: build_clause_tagging,
    TaskKind.STATUTE_LINKING: build_statute_linking,
    TaskKind.MULTILINGUAL_SIMPLIFY: build_multilingual,
    TaskKind.TRANSLATE: _text_builder("translatedText", TranslationResult),
    TaskKind.BAIL_DOCUMENT_EXTRACTION: build_bail_document,
    TaskKind.LEGAL_ADVICE: _text_builder("advice", LegalAdviceResult),
    TaskKind.VOICE_RESPONSE: _text_builder("response", VoiceResult),
}
