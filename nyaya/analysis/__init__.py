from nyaya.analysis.models import AnalysisResult
from nyaya.analysis.response_validator import ResponseValidator
from nyaya.analysis.serialization import to_payload
from nyaya.analysis.tasks import AnalysisTask, TaskKind

__all__ = ["AnalysisResult", "AnalysisTask", "ResponseValidator", "TaskKind", "to_payload"]
