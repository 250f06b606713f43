from dataclasses import fields

import pytest

from nyaya.analysis.models import (
    BailDocumentResult,
    DocumentAnalysisResult,
    MultilingualResult,
    RedFlag,
    RedFlagResult,
    SimplifyResult,
)
from nyaya.analysis.response_validator import ResponseValidator
from nyaya.analysis.tasks import (
    AnalysisTask,
    BailDocumentExtraction,
    ClauseTagging,
    DocumentAnalysis,
    LegalAdvice,
    MultilingualSimplify,
    RedFlagDetection,
    Simplify,
    StatuteLinking,
    Translate,
    VoiceResponse,
)

ALL_TASKS: list[AnalysisTask] = [
    DocumentAnalysis(),
    Simplify(),
    RedFlagDetection(),
    ClauseTagging(),
    StatuteLinking(),
    MultilingualSimplify(),
    Translate(target_language="hindi"),
    BailDocumentExtraction(),
    LegalAdvice(),
    VoiceResponse(),
]


def _field_names(value: object) -> set[str]:
    return {f.name for f in fields(value)}  # type: ignore[arg-type]


@pytest.fixture()
def validator() -> ResponseValidator:
    return ResponseValidator()


class TestSchemaInvariance:
    @pytest.mark.parametrize("task", ALL_TASKS, ids=lambda t: t.kind.value)
    @pytest.mark.parametrize("raw", ["not json", "", '{"unexpected": true}', "[1, 2, 3]"])
    def test_result_shape_independent_of_output(
        self, validator: ResponseValidator, task: AnalysisTask, raw: str
    ) -> None:
        reference = validator.validate(task, '{"totally": "different"}')
        result = validator.validate(task, raw)
        assert type(result) is type(reference)
        assert _field_names(result) == _field_names(reference)

    @pytest.mark.parametrize("task", ALL_TASKS, ids=lambda t: t.kind.value)
    @pytest.mark.parametrize(
        "raw",
        [
            '{"riskAssessment": {"score": NaN}}',
            '{"riskAssessment": {"score": Infinity}}',
            '{"summary": {"totalClauses": 1e400}}',
            '{"riskAssessment": {"score": 1e400}}',
            "[" * 100000 + "]" * 100000,
        ],
        ids=["nan", "infinity", "overflow-count", "overflow-score", "deep-nesting"],
    )
    def test_non_standard_numbers_and_nesting_fall_back(
        self, validator: ResponseValidator, task: AnalysisTask, raw: str
    ) -> None:
        reference = validator.validate(task, "not json")
        result = validator.validate(task, raw)
        assert type(result) is type(reference)
        assert _field_names(result) == _field_names(reference)

    @pytest.mark.parametrize("task", ALL_TASKS, ids=lambda t: t.kind.value)
    def test_never_raises_on_garbage(self, validator: ResponseValidator, task: AnalysisTask) -> None:
        validator.validate(task, "```json\n{broken\n```")


class TestFallbacks:
    def test_red_flag_fallback_is_single_low_entry(self, validator: ResponseValidator) -> None:
        result = validator.validate(RedFlagDetection(), "not json")
        assert isinstance(result, RedFlagResult)
        assert len(result.red_flags) == 1
        assert result.red_flags[0].type == "analysis_error"
        assert result.red_flags[0].severity == "low"

    def test_document_analysis_fallback_keeps_raw_text(self, validator: ResponseValidator) -> None:
        result = validator.validate(DocumentAnalysis(), "The lease looks fine.")
        assert isinstance(result, DocumentAnalysisResult)
        assert result.simplified_summary == "The lease looks fine."
        assert result.multilingual_summary["english"] == "The lease looks fine."
        assert result.risk_assessment.score == 50

    def test_simplify_fallback_is_prose(self, validator: ResponseValidator) -> None:
        result = validator.validate(Simplify(), "This means you pay rent monthly.")
        assert result == SimplifyResult(simplified_text="This means you pay rent monthly.")

    def test_multilingual_fallback(self, validator: ResponseValidator) -> None:
        result = validator.validate(MultilingualSimplify(), "oops")
        assert isinstance(result, MultilingualResult)
        assert result.summaries == {"english": "oops"}

    def test_bail_fallback_echoes_source(self, validator: ResponseValidator) -> None:
        result = validator.validate(
            BailDocumentExtraction(), "unparseable", source_text="Bail bond text"
        )
        assert isinstance(result, BailDocumentResult)
        assert result.extracted_text == "Bail bond text"
        assert result.analysis == "unparseable"

    def test_schema_mismatch_falls_back(self, validator: ResponseValidator) -> None:
        raw = '[{"type": "penalty_clause", "severity": "catastrophic"}]'
        result = validator.validate(RedFlagDetection(), raw)
        assert isinstance(result, RedFlagResult)
        assert result.red_flags[0].type == "analysis_error"


class TestValidOutput:
    def test_penalty_clause_passes_through(self, validator: ResponseValidator) -> None:
        raw = (
            '[{"type":"penalty_clause","severity":"high","description":"Excessive penalty",'
            '"location":"Clause 5","recommendation":"Negotiate",'
            '"indianLawReference":"Indian Contract Act 1872, Section 74"}]'
        )
        result = validator.validate(RedFlagDetection(), raw)
        assert result == RedFlagResult(
            red_flags=[
                RedFlag(
                    type="penalty_clause",
                    severity="high",
                    description="Excessive penalty",
                    location="Clause 5",
                    recommendation="Negotiate",
                    indian_law_reference="Indian Contract Act 1872, Section 74",
                )
            ]
        )

    def test_fenced_output_is_accepted(self, validator: ResponseValidator) -> None:
        result = validator.validate(Simplify(), '```json\n{"simplifiedText": "Short"}\n```')
        assert result == SimplifyResult(simplified_text="Short")

    def test_nan_score_uses_document_fallback(self, validator: ResponseValidator) -> None:
        raw = '{"riskAssessment": {"score": NaN}}'
        result = validator.validate(DocumentAnalysis(), raw)
        assert isinstance(result, DocumentAnalysisResult)
        assert result.simplified_summary == raw
        assert result.risk_assessment.score == 50
