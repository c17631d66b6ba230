"""
Resume-to-Job Keyword Matching Module.

Compares the keyword set of a resume against the keyword set of a job
description and reports matched keywords, missing keywords and a
percentage score.
"""

import logging
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Optional

from src.errors import ValidationError
from src.keyword_engine import STOPWORDS, extract_keywords

logger = logging.getLogger("resume_checker.matcher")


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing a resume against a job description."""

    score: int
    matched_keywords: tuple[str, ...]
    missing_keywords: tuple[str, ...]

    @property
    def total_keywords(self) -> int:
        return len(self.matched_keywords) + len(self.missing_keywords)


def validate_job_description(jd_keywords: Sequence[str]) -> None:
    """
    Ensure the job description produced at least one keyword.

    Raises:
        ValidationError: If jd_keywords is empty.
    """
    if not jd_keywords:
        raise ValidationError()


def calculate_score(matched: int, total: int) -> int:
    """
    Percentage of matched keywords, rounded half-up to an integer.

    Args:
        matched: Number of job keywords found in the resume.
        total: Number of job keywords. Must be positive.

    Returns:
        Score between 0 and 100.
    """
    if total <= 0:
        raise ValueError(f"total must be positive, got {total}")

    # * floor(100 * matched / total + 0.5) in exact integer arithmetic
    return (200 * matched + total) // (2 * total)


def compare(resume_keywords: Collection[str], jd_keywords: Sequence[str]) -> MatchResult:
    """
    Partition job keywords into matched and missing.

    Args:
        resume_keywords: Keywords extracted from the resume.
        jd_keywords: Keywords extracted from the job description, in
            first-occurrence order.

    Returns:
        MatchResult with both lists in job description order.

    Raises:
        ValidationError: If jd_keywords is empty.
    """
    validate_job_description(jd_keywords)

    resume_set = set(resume_keywords)
    matched = []
    missing = []

    for keyword in jd_keywords:
        if keyword in resume_set:
            matched.append(keyword)
        else:
            missing.append(keyword)

    return MatchResult(
        score=calculate_score(len(matched), len(jd_keywords)),
        matched_keywords=tuple(matched),
        missing_keywords=tuple(missing),
    )


class KeywordMatcher:
    """
    Extracts keywords from both texts and compares them.

    The stopword set is fixed at construction and shared read-only by
    every comparison.
    """

    def __init__(self, stopwords: Collection[str] = STOPWORDS):
        self.stopwords = frozenset(stopwords)

    def extract(self, text: Optional[str]) -> list[str]:
        return extract_keywords(text, self.stopwords)

    def compare(self, resume_keywords: Collection[str], jd_keywords: Sequence[str]) -> MatchResult:
        return compare(resume_keywords, jd_keywords)

    def match(self, resume_text: Optional[str], job_text: Optional[str]) -> MatchResult:
        """
        Score a resume text against a job description text.

        Args:
            resume_text: Decoded resume text.
            job_text: Job description text.

        Returns:
            MatchResult for the pair.

        Raises:
            ValidationError: If the job description has no keywords.
        """
        jd_keywords = self.extract(job_text)
        validate_job_description(jd_keywords)

        resume_keywords = self.extract(resume_text)
        result = self.compare(resume_keywords, jd_keywords)

        logger.debug(
            "Match computed score=%s matched=%s missing=%s resume_keywords=%s",
            result.score,
            len(result.matched_keywords),
            len(result.missing_keywords),
            len(resume_keywords),
        )
        return result


def match_resume_to_job(resume_text: Optional[str], job_text: Optional[str]) -> MatchResult:
    """
    Convenience function to score a resume against a job description.

    Args:
        resume_text: Decoded resume text.
        job_text: Job description text.

    Returns:
        MatchResult for the pair.
    """
    return KeywordMatcher().match(resume_text, job_text)
