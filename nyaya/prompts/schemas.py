"""JSON output skeletons the model is instructed to follow, per task.

The skeletons mirror the result records in ``nyaya.analysis.models``;
enumerated domains are spelled as ``"high|medium|low"``.
"""

from typing import Any

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

RISK_DOMAIN = "high|medium|low"

RED_FLAG = {
    "type": "penalty_clause",
    "severity": RISK_DOMAIN,
    "description": "Clear description of the issue",
    "location": "Where in the text this appears",
    "recommendation": "What the user should do",
    "indianLawReference": "Relevant Indian law section",
}

STATUTE_LINK = {
    "clause": "relevant clause text",
    "statute": "Indian Contract Act 1872, Section 73",
    "precedent": "Relevant case law",
    "explanation": "How this statute applies to the clause",
    "implications": "What this means for the parties",
    "riskLevel": RISK_DOMAIN,
}


def output_schema(task: AnalysisTask) -> Any:
    """Return the JSON skeleton for *task*."""
    if isinstance(task, DocumentAnalysis):
        return {
            "redFlags": [RED_FLAG],
            "clauseTags": [
                {"category": "Termination", "clauses": ["clause text"], "riskLevel": RISK_DOMAIN}
            ],
            "statuteLinks": [STATUTE_LINK],
            "riskAssessment": {
                "overallRisk": RISK_DOMAIN,
                "score": 85,
                "concerns": ["list of main concerns"],
            },
            "simplifiedSummary": "Plain language summary",
            "multilingualSummary": {
                "hindi": "Hindi summary",
                "english": "English summary",
                "tamil": "Tamil summary",
                "telugu": "Telugu summary",
            },
            "recommendations": ["Actionable recommendation 1", "Actionable recommendation 2"],
        }
    if isinstance(task, RedFlagDetection):
        return [RED_FLAG]
    if isinstance(task, ClauseTagging):
        return {
            "clauseTags": [
                {
                    "category": "Termination & Renewal",
                    "clauses": [
                        {
                            "text": "exact clause text",
                            "riskLevel": RISK_DOMAIN,
                            "description": "what this clause means",
                            "recommendation": "what to watch out for",
                        }
                    ],
                }
            ],
            "summary": {
                "totalClauses": 15,
                "highRiskClauses": 3,
                "categories": ["list of categories found"],
            },
        }
    if isinstance(task, StatuteLinking):
        return {
            "statuteLinks": [STATUTE_LINK],
            "summary": {
                "totalLinks": 8,
                "highRiskLinks": 2,
                "statutes": ["list of statutes referenced"],
            },
        }
    if isinstance(task, MultilingualSimplify):
        return {
            "summaries": {lang: f"{lang.capitalize()} summary" for lang in task.languages},
            "keyPoints": {lang: ["key point 1", "key point 2"] for lang in task.languages},
            "warnings": {lang: [f"Important warning in {lang.capitalize()}"]
                         for lang in task.languages},
        }
    if isinstance(task, BailDocumentExtraction):
        return {
            "documentType": "Bail Bond|Surety Bond|Personal Bond|Other",
            "defendantInfo": {"name": "", "age": "", "address": ""},
            "bailAmount": {"amount": "", "currency": "INR"},
            "suretyInfo": [{"name": "", "relationship": "", "address": "", "amount": ""}],
            "courtInfo": {"name": "", "location": "", "caseNumber": ""},
            "importantDates": [{"event": "Next hearing", "date": "YYYY-MM-DD"}],
            "conditions": ["special condition or restriction"],
            "riskAssessment": {"level": RISK_DOMAIN, "factors": ["risk factor"]},
            "complianceRequirements": ["compliance requirement"],
            "nextSteps": ["next step for the defendant"],
        }
    if isinstance(task, Simplify):
        return {"simplifiedText": "Simplified explanation"}
    if isinstance(task, Translate):
        return {"translatedText": "Translation with context notes"}
    if isinstance(task, LegalAdvice):
        return {"advice": "Structured legal guidance"}
    if isinstance(task, VoiceResponse):
        return {"response": "Short conversational reply"}
    raise TypeError(f"Unsupported analysis task: {task!r}")
