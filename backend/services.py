"""
Business Logic Services for the Resume Checker API.
"""

import logging
import time
from typing import Optional

from backend.schemas import AnalyzeResponse, CheckRecord
from src.config import get_settings
from src.data_extraction import decode_document
from src.history import HistoryStore
from src.matcher import KeywordMatcher

# * Module logger
logger = logging.getLogger("resume_checker.services")


class ResumeCheckService:
    """Service for scoring resumes and reading check history."""

    def __init__(
        self,
        store: Optional[HistoryStore] = None,
        matcher: Optional[KeywordMatcher] = None,
    ):
        """
        Initialize the check service.

        Args:
            store: History store. Created from settings on first use if None.
            matcher: Keyword matcher. Defaults to one using the standard stopwords.
        """
        self._store = store
        self.matcher = matcher or KeywordMatcher()

    @property
    def store(self) -> HistoryStore:
        """Lazy-load the history store."""
        if self._store is None:
            self._store = HistoryStore()
        return self._store

    def analyze_text(
        self,
        resume_text: str,
        job_description: str,
        file_name: Optional[str] = None,
        job_title: Optional[str] = None,
        save: bool = True,
    ) -> AnalyzeResponse:
        """
        Score decoded resume text against a job description.

        Args:
            resume_text: Decoded resume text.
            job_description: Job description text.
            file_name: Resume file name, echoed back and stored.
            job_title: Optional job title for the history record.
            save: Whether to persist the result.

        Returns:
            AnalyzeResponse with the score and missing keywords.

        Raises:
            ValidationError: If the job description has no keywords.
        """
        start = time.perf_counter()
        logger.info(
            "Analyze start file=%s resume_chars=%s job_chars=%s",
            file_name,
            len(resume_text),
            len(job_description or ""),
        )

        result = self.matcher.match(resume_text, job_description)

        check_id = None
        if save:
            try:
                check = self.store.add(
                    score=result.score,
                    missing_keywords=list(result.missing_keywords),
                    file_name=file_name,
                    job_title=job_title,
                )
                check_id = check.id
            except Exception as e:
                logger.error("Failed to save check file=%s error=%s", file_name, e, exc_info=True)

        logger.info(
            "Analyze complete file=%s score=%s missing=%s duration=%.3fs",
            file_name,
            result.score,
            len(result.missing_keywords),
            time.perf_counter() - start,
        )

        return AnalyzeResponse(
            score=result.score,
            missing_keywords=list(result.missing_keywords),
            matched_keywords=list(result.matched_keywords),
            file_name=file_name,
            check_id=check_id,
        )

    def analyze(
        self,
        file_name: Optional[str],
        data: bytes,
        job_description: str,
        content_type: Optional[str] = None,
        job_title: Optional[str] = None,
    ) -> AnalyzeResponse:
        """
        Decode an uploaded resume and score it against a job description.

        Raises:
            DecodeError: If the document could not be read.
            EmptyTextError: If the document holds no text.
            ValidationError: If the job description has no keywords.
        """
        resume_text = decode_document(file_name, data, content_type)
        return self.analyze_text(
            resume_text,
            job_description,
            file_name=file_name,
            job_title=job_title,
        )

    def list_checks(self, limit: Optional[int] = None) -> list[CheckRecord]:
        """
        List the most recent checks, newest first.

        Args:
            limit: Maximum number of checks. Defaults to HISTORY_LIMIT.
        """
        limit = limit or get_settings().history_limit
        checks = [CheckRecord.model_validate(check) for check in self.store.recent(limit)]
        logger.info("Checks listed count=%s", len(checks))
        return checks

    def get_check(self, check_id: str) -> Optional[CheckRecord]:
        check = self.store.get(check_id)
        if check is None:
            return None
        return CheckRecord.model_validate(check)


# * Global service instance
check_service = ResumeCheckService()


def get_check_service() -> ResumeCheckService:
    """FastAPI dependency returning the shared check service."""
    return check_service
