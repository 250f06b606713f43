import json
from pathlib import Path

from nyaya.analysis.tasks import (
    AnalysisTask,
    DocumentAnalysis,
    LegalAdvice,
    MultilingualSimplify,
    Simplify,
    TaskKind,
    Translate,
    VoiceResponse,
)
from nyaya.prompts.prompt_loader import load_prompt_template
from nyaya.prompts.schemas import output_schema


class PromptComposer:
    """Builds the full instruction string for an analysis task.

    Rendering is a pure function of (task, text): the same inputs always yield
    the same prompt. All templates are loaded at construction.
    """

    def __init__(self, template_dir: Path | None = None) -> None:
        self._templates = {
            kind: load_prompt_template(kind.value, template_dir) for kind in TaskKind
        }

    def compose(self, task: AnalysisTask, text: str) -> str:
        schema = json.dumps(output_schema(task), indent=2, ensure_ascii=False)
        return self._templates[task.kind].format(
            document_text=text,
            output_schema=schema,
            **self._params(task),
        ).strip()

    @staticmethod
    def _params(task: AnalysisTask) -> dict[str, str]:
        if isinstance(task, (DocumentAnalysis, Simplify)):
            return {"language": task.language}
        if isinstance(task, MultilingualSimplify):
            return {"languages": ", ".join(task.languages)}
        if isinstance(task, Translate):
            return {"target_language": task.target_language}
        if isinstance(task, (LegalAdvice, VoiceResponse)):
            return {"context": task.context}
        return {}
