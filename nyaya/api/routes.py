from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request

from nyaya.analysis.serialization import to_payload
from nyaya.analysis.tasks import (
    DEFAULT_SUMMARY_LANGUAGES,
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
from nyaya.api.payload import RequestPayload, read_document, read_payload
from nyaya.orchestrator.orchestrator import AnalysisOrchestrator

router = APIRouter()


def _orchestrator(request: Request) -> AnalysisOrchestrator:
    return request.app.state.orchestrator


async def _run(
    request: Request,
    task: AnalysisTask,
    payload: RequestPayload,
    *,
    text_field: str = "text",
) -> dict[str, Any]:
    document = await read_document(payload, request.app.state.settings.max_upload_bytes)
    result = await _orchestrator(request).run(
        task, text=payload.text(text_field), document=document
    )
    return to_payload(result)


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    orchestrator = _orchestrator(request)
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "model": orchestrator.model_configured,
            "provider": orchestrator.model_provider,
            "pdfEngine": request.app.state.settings.pdf_engine,
        },
    }


@router.post("/analyze-document")
async def analyze_document(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    task = DocumentAnalysis(language=payload.text("language") or "en")
    return await _run(request, task, payload)


@router.post("/simplify")
async def simplify(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    task = Simplify(language=payload.text("language") or "en")
    return await _run(request, task, payload)


@router.post("/detect-red-flags")
async def detect_red_flags(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    return await _run(request, RedFlagDetection(), payload)


@router.post("/tag-clauses")
async def tag_clauses(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    return await _run(request, ClauseTagging(), payload)


@router.post("/link-statutes")
async def link_statutes(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    return await _run(request, StatuteLinking(), payload)


@router.post("/multilingual-simplify")
async def multilingual_simplify(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    languages = payload.string_list("languages")
    task = MultilingualSimplify(
        languages=tuple(languages) if languages is not None else DEFAULT_SUMMARY_LANGUAGES
    )
    return await _run(request, task, payload)


@router.post("/translate")
async def translate(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    task = Translate(target_language=payload.text("targetLanguage") or "")
    return await _run(request, task, payload)


@router.post("/process-bail-document")
async def process_bail_document(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    return await _run(request, BailDocumentExtraction(), payload)


@router.post("/legal-advice")
async def legal_advice(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    task = LegalAdvice(context=payload.text("context") or "")
    return await _run(request, task, payload, text_field="question")


@router.post("/voice-assistant")
async def voice_assistant(request: Request) -> dict[str, Any]:
    payload = await read_payload(request)
    task = VoiceResponse(context=payload.text("context") or "")
    return await _run(request, task, payload, text_field="message")
