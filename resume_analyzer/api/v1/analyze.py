from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile, status
from starlette.concurrency import run_in_threadpool

from resume_analyzer.core.config import settings
from resume_analyzer.core.errors import UnsupportedDocumentError
from resume_analyzer.core.rate_limit import rate_limit
from resume_analyzer.parsing import extract_text
from resume_analyzer.schemas import AnalysisResult, AnalyzeRequest
from resume_analyzer.services import analyze_resume

router = APIRouter()


@router.post("/analyze", response_model=AnalysisResult)
@rate_limit()
async def analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    return await run_in_threadpool(analyze_resume, payload)


@router.post("/analyze/upload", response_model=AnalysisResult)
@rate_limit(settings.upload_rate_limit)
async def analyze_upload(
    request: Request,
    resume_file: UploadFile = File(...),
    job_title: str = Form(default=""),
    job_description_text: str = Form(default=""),
    candidate_name: str = Form(default=""),
    email: str = Form(default=""),
    language: str | None = Form(default=None),
):
    _ = request
    filename = resume_file.filename or "resume"

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await resume_file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes} bytes.",
            )
        chunks.append(chunk)

    try:
        resume_text = await run_in_threadpool(extract_text, b"".join(chunks), filename)
    except UnsupportedDocumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    payload = AnalyzeRequest(
        candidate_name=candidate_name,
        email=email,
        job_title=job_title,
        job_description_text=job_description_text,
        resume_text=resume_text,
        language=language or None,
    )
    return await run_in_threadpool(analyze_resume, payload)
