"""
FastAPI Backend for Resume Checker.

Provides REST API endpoints for:
- Scoring an uploaded resume against a job description
- Listing recent checks
- Fetching a stored check
"""

import asyncio
import logging
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from backend.schemas import AnalyzeResponse, CheckRecord, ChecksListResponse, ErrorResponse
from backend.services import ResumeCheckService, get_check_service
from src import __version__
from src.config import get_settings
from src.errors import ResumeCheckError
from src.logging_config import configure_logging

logger = logging.getLogger("resume_checker.api")

settings = get_settings()
configure_logging(settings.log_level)

# * Create FastAPI app
app = FastAPI(
    title="Resume Keyword Checker API",
    description="API for scoring resumes against job descriptions by keyword overlap",
    version=__version__,
)

# * Configure CORS for the frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Resume Keyword Checker API", "version": __version__}


@app.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
async def analyze_resume(
    resume: Optional[UploadFile] = File(None),
    job_description: str = Form(""),
    job_title: Optional[str] = Form(None),
    service: ResumeCheckService = Depends(get_check_service),
):
    """
    Score an uploaded resume against a job description.

    Returns the score, the full list of missing keywords and the id of
    the stored check.
    """
    if resume is None:
        raise HTTPException(status_code=400, detail="No resume file uploaded")

    logger.info("Received upload file=%s content_type=%s", resume.filename, resume.content_type)

    max_bytes = get_settings().max_upload_bytes
    data = await resume.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Resume file is too large (limit {max_bytes} bytes)",
        )

    try:
        # * PDF parsing is CPU bound, keep it off the event loop
        return await asyncio.to_thread(
            service.analyze,
            file_name=resume.filename,
            data=data,
            job_description=job_description,
            content_type=resume.content_type,
            job_title=job_title,
        )
    except ResumeCheckError as e:
        logger.info("Analyze rejected file=%s reason=%s", resume.filename, e)
        raise HTTPException(status_code=400, detail=e.user_message)
    except Exception as e:
        logger.error("Analyze error file=%s error=%s", resume.filename, e, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error while analyzing the resume")


@app.get("/api/checks", response_model=ChecksListResponse)
async def list_checks(
    limit: Optional[int] = Query(None, ge=1, le=100),
    service: ResumeCheckService = Depends(get_check_service),
):
    """
    List recent checks, newest first.

    Without a limit, HISTORY_LIMIT checks are returned.
    """
    checks = await asyncio.to_thread(service.list_checks, limit)
    return ChecksListResponse(checks=checks, count=len(checks))


@app.get("/api/checks/{check_id}", response_model=CheckRecord, responses={404: {"model": ErrorResponse}})
async def get_check(
    check_id: str,
    service: ResumeCheckService = Depends(get_check_service),
):
    """
    Get a stored check by id.
    """
    check = await asyncio.to_thread(service.get_check, check_id)

    if check is None:
        raise HTTPException(status_code=404, detail=f"Check not found: {check_id}")

    return check


# * Run with: uvicorn backend.api:app --reload --port 8000
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
