"""Canonical result records, one per analysis task.

Field names are snake_case here and camelCase on the wire (see serialization).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RedFlag:
    type: str
    severity: str
    description: str = ""
    location: str = ""
    recommendation: str = ""
    indian_law_reference: str = ""


@dataclass(frozen=True)
class TaggedClause:
    text: str
    risk_level: str = "medium"
    description: str = ""
    recommendation: str = ""


@dataclass(frozen=True)
class ClauseTag:
    category: str
    clauses: list[TaggedClause] = field(default_factory=list)


@dataclass(frozen=True)
class ClauseSummary:
    total_clauses: int = 0
    high_risk_clauses: int = 0
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class StatuteLink:
    clause: str
    statute: str
    precedent: str = ""
    explanation: str = ""
    implications: str = ""
    risk_level: str = "medium"


@dataclass(frozen=True)
class StatuteSummary:
    total_links: int = 0
    high_risk_links: int = 0
    statutes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RiskAssessment:
    overall_risk: str = "medium"
    score: int = 50
    concerns: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DocumentClauseTag:
    category: str
    clauses: list[str] = field(default_factory=list)
    risk_level: str = "medium"


@dataclass(frozen=True)
class DocumentAnalysisResult:
    red_flags: list[RedFlag] = field(default_factory=list)
    clause_tags: list[DocumentClauseTag] = field(default_factory=list)
    statute_links: list[StatuteLink] = field(default_factory=list)
    risk_assessment: RiskAssessment = field(default_factory=RiskAssessment)
    simplified_summary: str = ""
    multilingual_summary: dict[str, str] = field(default_factory=dict)
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SimplifyResult:
    simplified_text: str


@dataclass(frozen=True)
class RedFlagResult:
    red_flags: list[RedFlag] = field(default_factory=list)


@dataclass(frozen=True)
class ClauseTaggingResult:
    clause_tags: list[ClauseTag] = field(default_factory=list)
    summary: ClauseSummary = field(default_factory=ClauseSummary)


@dataclass(frozen=True)
class StatuteLinkingResult:
    statute_links: list[StatuteLink] = field(default_factory=list)
    summary: StatuteSummary = field(default_factory=StatuteSummary)


@dataclass(frozen=True)
class MultilingualResult:
    summaries: dict[str, str] = field(default_factory=dict)
    key_points: dict[str, list[str]] = field(default_factory=dict)
    warnings: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str


@dataclass(frozen=True)
class DefendantInfo:
    name: str = ""
    age: str = ""
    address: str = ""


@dataclass(frozen=True)
class BailAmount:
    amount: str = ""
    currency: str = "INR"


@dataclass(frozen=True)
class Surety:
    name: str = ""
    relationship: str = ""
    address: str = ""
    amount: str = ""


@dataclass(frozen=True)
class CourtInfo:
    name: str = ""
    location: str = ""
    case_number: str = ""


@dataclass(frozen=True)
class ImportantDate:
    event: str = ""
    date: str = ""


@dataclass(frozen=True)
class BailRiskAssessment:
    level: str = "medium"
    factors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BailDocumentResult:
    document_type: str = "Bail Document"
    defendant_info: DefendantInfo = field(default_factory=DefendantInfo)
    bail_amount: BailAmount = field(default_factory=BailAmount)
    surety_info: list[Surety] = field(default_factory=list)
    court_info: CourtInfo = field(default_factory=CourtInfo)
    important_dates: list[ImportantDate] = field(default_factory=list)
    conditions: list[str] = field(default_factory=list)
    risk_assessment: BailRiskAssessment = field(default_factory=BailRiskAssessment)
    compliance_requirements: list[str] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)
    extracted_text: str = ""
    analysis: str = ""


@dataclass(frozen=True)
class LegalAdviceResult:
    advice: str


@dataclass(frozen=True)
class VoiceResult:
    response: str


AnalysisResult = (
    DocumentAnalysisResult
    | SimplifyResult
    | RedFlagResult
    | ClauseTaggingResult
    | StatuteLinkingResult
    | MultilingualResult
    | TranslationResult
    | BailDocumentResult
    | LegalAdviceResult
    | VoiceResult
)
