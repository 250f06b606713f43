import asyncio
from typing import ClassVar

from nyaya.analysis.models import AnalysisResult
from nyaya.analysis.response_validator import ResponseValidator
from nyaya.analysis.tasks import (
    AnalysisTask,
    BailDocumentExtraction,
    MultilingualSimplify,
    TaskKind,
    Translate,
)
from nyaya.config.settings import Settings
from nyaya.extraction.factory import TextExtractorFactory
from nyaya.extraction.models import SourceDocument
from nyaya.extraction.text_extractor import TextExtractor
from nyaya.gateway.exceptions import ModelTimeoutError, ModelTransportError
from nyaya.gateway.factory import ModelGatewayFactory
from nyaya.gateway.gateway import ModelGateway
from nyaya.gateway.models import ModelRequest, ModelResponse
from nyaya.logging.logger import Log
from nyaya.orchestrator.exceptions import InvalidInputError
from nyaya.prompts.composer import PromptComposer


class AnalysisOrchestrator:
    """Runs one analysis request end to end.

    Pipeline: validate input -> extract (if file) -> compose -> invoke model
    -> validate response. Holds no per-request state, so one instance serves
    any number of concurrent requests.

    Extraction, model unavailability, timeouts and transport errors propagate
    to the caller; malformed model output never does.
    """

    MISSING_INPUT_MESSAGES: ClassVar[dict[TaskKind, str]] = {
        TaskKind.DOCUMENT_ANALYSIS: "Document text or file is required",
        TaskKind.TRANSLATE: "Text and target language are required",
        TaskKind.BAIL_DOCUMENT_EXTRACTION: "File is required",
        TaskKind.LEGAL_ADVICE: "Question is required",
        TaskKind.VOICE_RESPONSE: "Message is required",
    }

    def __init__(
        self,
        *,
        extractor: TextExtractor,
        composer: PromptComposer,
        gateway: ModelGateway,
        validator: ResponseValidator,
        temperature: float = 0.7,
        max_retries: int = 0,
    ) -> None:
        self._extractor = extractor
        self._composer = composer
        self._gateway = gateway
        self._validator = validator
        self._temperature = temperature
        self._max_retries = max(0, max_retries)

    @property
    def model_configured(self) -> bool:
        return self._gateway.is_configured

    @property
    def model_provider(self) -> str:
        return self._gateway.provider

    async def run(
        self,
        task: AnalysisTask,
        *,
        text: str | None = None,
        document: SourceDocument | None = None,
    ) -> AnalysisResult:
        """Run *task* over an uploaded document or raw text.

        A document takes precedence over text when both are given.

        Raises:
            InvalidInputError: if required input or parameters are missing.
            ExtractionError: if the document cannot be decoded.
            ModelUnavailableError: if the model is not configured.
            ModelTimeoutError: if the model call timed out.
            ModelTransportError: if the model call failed in transit.
        """
        self._check_params(task)
        source_text = await self._resolve_text(task, text, document)

        prompt = self._composer.compose(task, source_text)
        request = ModelRequest(
            prompt_text=prompt,
            max_tokens=task.max_tokens,
            temperature=self._temperature,
        )
        response = await self._invoke(task, request)
        return self._validator.validate(task, response.raw_text, source_text=source_text)

    def _missing_input(self, task: AnalysisTask) -> InvalidInputError:
        return InvalidInputError(self.MISSING_INPUT_MESSAGES.get(task.kind, "Text is required"))

    def _check_params(self, task: AnalysisTask) -> None:
        if isinstance(task, Translate) and not task.target_language.strip():
            raise self._missing_input(task)
        if isinstance(task, MultilingualSimplify) and not task.languages:
            raise InvalidInputError("At least one language is required")

    async def _resolve_text(
        self,
        task: AnalysisTask,
        text: str | None,
        document: SourceDocument | None,
    ) -> str:
        if document is not None:
            extracted = await asyncio.to_thread(self._extractor.extract, document)
            if not extracted.strip():
                raise InvalidInputError("No extractable text found in document")
            return extracted
        if isinstance(task, BailDocumentExtraction) or not (text and text.strip()):
            raise self._missing_input(task)
        return text

    async def _invoke(self, task: AnalysisTask, request: ModelRequest) -> ModelResponse:
        attempt = 1
        while True:
            try:
                return await self._gateway.invoke(request)
            except (ModelTimeoutError, ModelTransportError) as exc:
                if attempt > self._max_retries:
                    Log.error(f"{task.kind.value} model call failed after {attempt} attempt(s): {exc}")
                    raise
                Log.warning(f"{task.kind.value} model call failed, retrying (attempt {attempt + 1}): {exc}")
                attempt += 1


def build_orchestrator(settings: Settings) -> AnalysisOrchestrator:
    """Build an AnalysisOrchestrator with all required collaborators."""
    return AnalysisOrchestrator(
        extractor=TextExtractorFactory.create(settings),
        composer=PromptComposer(),
        gateway=ModelGatewayFactory.create(settings),
        validator=ResponseValidator(),
        temperature=settings.model_temperature,
        max_retries=settings.model_max_retries,
    )
