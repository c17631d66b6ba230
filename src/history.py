"""
Resume Check History.

SQLAlchemy storage for past check results, read back newest first.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON, Column, DateTime, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from src.config import get_settings

logger = logging.getLogger("resume_checker.history")

Base = declarative_base()

DEFAULT_JOB_TITLE = "Untitled Job"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return value in UTC; naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ResumeCheck(Base):
    """
    One stored resume check.
    """
    __tablename__ = "resume_checks"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    job_title = Column(String(255), nullable=False, default=DEFAULT_JOB_TITLE)
    file_name = Column(String(255))
    score = Column(Integer, nullable=False)
    missing_keywords = Column(JSON)  # * Only the first few, for display
    created_at = Column(DateTime(timezone=True), default=_utc_now, index=True)  # * UTC

    def __repr__(self):
        return f"<ResumeCheck(id={self.id}, file={self.file_name}, score={self.score})>"


class HistoryStore:
    """Append-only store of resume checks."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        stored_missing_keywords: Optional[int] = None,
    ):
        """
        Initialize the store and create tables if needed.

        Args:
            database_url: SQLAlchemy URL. Defaults to the configured one.
            stored_missing_keywords: How many missing keywords to keep per
                record. Defaults to the configured value.
        """
        settings = get_settings()
        self.database_url = database_url or settings.database_url
        self.stored_missing_keywords = (
            settings.stored_missing_keywords
            if stored_missing_keywords is None
            else stored_missing_keywords
        )

        connect_args = {}
        if self.database_url.startswith("sqlite"):
            # * API handlers may run in worker threads
            connect_args["check_same_thread"] = False

        self.engine = create_engine(self.database_url, echo=False, connect_args=connect_args)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )
        Base.metadata.create_all(bind=self.engine)
        logger.info("History store ready url=%s", self.engine.url.render_as_string(hide_password=True))

    def add(
        self,
        score: int,
        missing_keywords: list[str],
        file_name: Optional[str] = None,
        job_title: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> ResumeCheck:
        """
        Persist a check result.

        Args:
            score: Match score.
            missing_keywords: Full ordered missing keyword list; only the
                first stored_missing_keywords entries are saved.
            file_name: Name of the uploaded resume.
            job_title: Job title, defaults to "Untitled Job".
            created_at: Timestamp of the check, defaults to now (UTC).

        Returns:
            The stored ResumeCheck.
        """
        check = ResumeCheck(
            id=str(uuid.uuid4()),
            job_title=(job_title or "").strip() or DEFAULT_JOB_TITLE,
            file_name=file_name,
            score=score,
            missing_keywords=list(missing_keywords[: self.stored_missing_keywords]),
            created_at=as_utc(created_at) if created_at else _utc_now(),
        )

        with self.SessionLocal() as session:
            session.add(check)
            session.commit()

        logger.info("Check saved id=%s score=%s", check.id, check.score)
        return check

    def recent(self, limit: int = 10) -> list[ResumeCheck]:
        """Return the most recent checks, newest first (ties broken by id)."""
        with self.SessionLocal() as session:
            return (
                session.query(ResumeCheck)
                .order_by(ResumeCheck.created_at.desc(), ResumeCheck.id.desc())
                .limit(limit)
                .all()
            )

    def get(self, check_id: str) -> Optional[ResumeCheck]:
        """Return one check by id, or None."""
        with self.SessionLocal() as session:
            return session.get(ResumeCheck, check_id)
