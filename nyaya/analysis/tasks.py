"""Analysis task variants.

Each variant is a frozen dataclass carrying its own input parameters and its
generation budget. ``AnalysisTask`` is the tagged union of all of them; the
``kind`` class attribute is the tag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class TaskKind(str, Enum):
    DOCUMENT_ANALYSIS = "document_analysis"
    SIMPLIFY = "simplify"
    RED_FLAG_DETECTION = "red_flag_detection"
    CLAUSE_TAGGING = "clause_tagging"
    STATUTE_LINKING = "statute_linking"
    MULTILINGUAL_SIMPLIFY = "multilingual_simplify"
    TRANSLATE = "translate"
    BAIL_DOCUMENT_EXTRACTION = "bail_document_extraction"
    LEGAL_ADVICE = "legal_advice"
    VOICE_RESPONSE = "voice_response"


DEFAULT_SUMMARY_LANGUAGES: tuple[str, ...] = ("hindi", "tamil", "telugu", "bengali", "marathi")


@dataclass(frozen=True)
class DocumentAnalysis:
    kind: ClassVar[TaskKind] = TaskKind.DOCUMENT_ANALYSIS
    max_tokens: ClassVar[int] = 4000

    language: str = "en"


@dataclass(frozen=True)
class Simplify:
    kind: ClassVar[TaskKind] = TaskKind.SIMPLIFY
    max_tokens: ClassVar[int] = 2000

    language: str = "en"


@dataclass(frozen=True)
class RedFlagDetection:
    kind: ClassVar[TaskKind] = TaskKind.RED_FLAG_DETECTION
    max_tokens: ClassVar[int] = 2000


@dataclass(frozen=True)
class ClauseTagging:
    kind: ClassVar[TaskKind] = TaskKind.CLAUSE_TAGGING
    max_tokens: ClassVar[int] = 2000


@dataclass(frozen=True)
class StatuteLinking:
    kind: ClassVar[TaskKind] = TaskKind.STATUTE_LINKING
    max_tokens: ClassVar[int] = 2000


@dataclass(frozen=True)
class MultilingualSimplify:
    kind: ClassVar[TaskKind] = TaskKind.MULTILINGUAL_SIMPLIFY
    max_tokens: ClassVar[int] = 3000

    languages: tuple[str, ...] = DEFAULT_SUMMARY_LANGUAGES


@dataclass(frozen=True)
class Translate:
    kind: ClassVar[TaskKind] = TaskKind.TRANSLATE
    max_tokens: ClassVar[int] = 2000

    target_language: str = ""


@dataclass(frozen=True)
class BailDocumentExtraction:
    kind: ClassVar[TaskKind] = TaskKind.BAIL_DOCUMENT_EXTRACTION
    max_tokens: ClassVar[int] = 2000


@dataclass(frozen=True)
class LegalAdvice:
    kind: ClassVar[TaskKind] = TaskKind.LEGAL_ADVICE
    max_tokens: ClassVar[int] = 2000

    context: str = ""


@dataclass(frozen=True)
class VoiceResponse:
    kind: ClassVar[TaskKind] = TaskKind.VOICE_RESPONSE
    max_tokens: ClassVar[int] = 1000

    context: str = ""


AnalysisTask = (
    DocumentAnalysis
    | Simplify
    | RedFlagDetection
    | ClauseTagging
    | StatuteLinking
    | MultilingualSimplify
    | Translate
    | BailDocumentExtraction
    | LegalAdvice
    | VoiceResponse
)
