from nyaya.analysis.models import (
    BailDocumentResult,
    ClauseTag,
    ClauseTaggingResult,
    MultilingualResult,
    RedFlag,
    RedFlagResult,
    TaggedClause,
)
from nyaya.analysis.serialization import camel_case, to_payload


class TestCamelCase:
    def test_single_word(self) -> None:
        assert camel_case("summary") == "summary"

    def test_multi_word(self) -> None:
        assert camel_case("indian_law_reference") == "indianLawReference"


class TestToPayload:
    def test_red_flags(self) -> None:
        result = RedFlagResult(red_flags=[RedFlag(type="penalty_clause", severity="high")])
        assert to_payload(result) == {
            "redFlags": [
                {
                    "type": "penalty_clause",
                    "severity": "high",
                    "description": "",
                    "location": "",
                    "recommendation": "",
                    "indianLawReference": "",
                }
            ]
        }

    def test_nested_records(self) -> None:
        result = ClauseTaggingResult(
            clause_tags=[ClauseTag(category="Payment", clauses=[TaggedClause(text="Pay rent")])]
        )
        payload = to_payload(result)
        assert payload["clauseTags"][0]["clauses"][0]["riskLevel"] == "medium"
        assert payload["summary"] == {"totalClauses": 0, "highRiskClauses": 0, "categories": []}

    def test_language_keys_are_not_renamed(self) -> None:
        result = MultilingualResult(
            summaries={"hindi_formal": "x"},
            key_points={"hindi_formal": ["a"]},
        )
        payload = to_payload(result)
        assert payload["summaries"] == {"hindi_formal": "x"}
        assert payload["keyPoints"] == {"hindi_formal": ["a"]}

    def test_bail_document_keys(self) -> None:
        payload = to_payload(BailDocumentResult())
        assert payload["documentType"] == "Bail Document"
        assert payload["bailAmount"] == {"amount": "", "currency": "INR"}
        assert payload["courtInfo"] == {"name": "", "location": "", "caseNumber": ""}
        assert "extractedText" in payload
