"""Deterministic, schema-conformant results used when model output is unusable."""

from collections.abc import Callable

from nyaya.analysis.models import (
    AnalysisResult,
    BailDocumentResult,
    ClauseSummary,
    ClauseTaggingResult,
    DocumentAnalysisResult,
    LegalAdviceResult,
    MultilingualResult,
    RedFlag,
    RedFlagResult,
    RiskAssessment,
    SimplifyResult,
    StatuteLinkingResult,
    StatuteSummary,
    TranslationResult,
    VoiceResult,
)
from nyaya.analysis.tasks import TaskKind

MANUAL_REVIEW = "Please review the document manually"


def build_fallback(kind: TaskKind, raw_text: str, source_text: str = "") -> AnalysisResult:
    """Return the fallback result for *kind*.

    *raw_text* is the unparseable model output; *source_text* is the document
    the model was asked about (only the bail extraction echoes it back).
    """
    return _FALLBACKS[kind](raw_text, source_text)


def _document_analysis(raw: str, _source: str) -> DocumentAnalysisResult:
    return DocumentAnalysisResult(
        red_flags=[],
        clause_tags=[],
        statute_links=[],
        risk_assessment=RiskAssessment(overall_risk="medium", score=50, concerns=[]),
        simplified_summary=raw,
        multilingual_summary={
            "english": raw,
            "hindi": "Analysis not available in Hindi",
        },
        recommendations=[MANUAL_REVIEW],
    )


def _red_flags(_raw: str, _source: str) -> RedFlagResult:
    return RedFlagResult(
        red_flags=[
            RedFlag(
                type="analysis_error",
                severity="low",
                description="Could not parse red flag analysis",
                location="N/A",
                recommendation=MANUAL_REVIEW,
                indian_law_reference="N/A",
            )
        ]
    )


def _multilingual(raw: str, _source: str) -> MultilingualResult:
    return MultilingualResult(
        summaries={"english": raw},
        key_points={"english": ["Please review manually"]},
        warnings={"english": ["Manual review recommended"]},
    )


def _bail_document(raw: str, source: str) -> BailDocumentResult:
    return BailDocumentResult(
        document_type="Bail Document",
        extracted_text=source,
        analysis=raw,
    )


_FALLBACKS: dict[TaskKind, Callable[[str, str], AnalysisResult]] = {
    TaskKind.DOCUMENT_ANALYSIS: _document_analysis,
    TaskKind.SIMPLIFY: lambda raw, _source: SimplifyResult(simplified_text=raw),
    TaskKind.RED_FLAG_DETECTION: _red_flags,
    TaskKind.CLAUSE_TAGGING: lambda _raw, _source: ClauseTaggingResult(
        clause_tags=[], summary=ClauseSummary()
    ),
    TaskKind.STATUTE_LINKING: lambda _raw, _source: StatuteLinkingResult(
        statute_links=[], summary=StatuteSummary()
    ),
    TaskKind.MULTILINGUAL_SIMPLIFY: _multilingual,
    TaskKind.TRANSLATE: lambda raw, _source: TranslationResult(translated_text=raw),
    TaskKind.BAIL_DOCUMENT_EXTRACTION: _bail_document,
    TaskKind.LEGAL_ADVICE: lambda raw, _source: LegalAdviceResult(advice=raw),
    TaskKind.VOICE_RESPONSE: lambda raw, _source: VoiceResult(response=raw),
}
