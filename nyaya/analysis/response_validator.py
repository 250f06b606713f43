from nyaya.analysis.exceptions import SchemaMismatchError
from nyaya.analysis.fallbacks import build_fallback
from nyaya.analysis.json_parser import ParseFailure, parse_json
from nyaya.analysis.models import AnalysisResult
from nyaya.analysis.tasks import AnalysisTask
from nyaya.analysis.validator import build_result
from nyaya.logging.logger import Log


class ResponseValidator:
    """Turns raw model text into the task's canonical result. Never raises."""

    def validate(
        self,
        task: AnalysisTask,
        raw_text: str,
        *,
        source_text: str = "",
    ) -> AnalysisResult:
        parsed = parse_json(raw_text)
        if isinstance(parsed, ParseFailure):
            return self._fallback(task, raw_text, source_text, parsed.reason)
        try:
            result = build_result(task.kind, parsed.value)
        except SchemaMismatchError as exc:
            return self._fallback(task, raw_text, source_text, f"Schema mismatch: {exc}")
        Log.info(f"Validated {task.kind.value} response")
        return result

    @staticmethod
    def _fallback(
        task: AnalysisTask,
        raw_text: str,
        source_text: str,
        reason: str,
    ) -> AnalysisResult:
        Log.warning(f"Using fallback result for {task.kind.value}: {reason}")
        return build_fallback(task.kind, raw_text, source_text)
