import dataclasses

import pytest

from src.errors import ValidationError
from src.keyword_engine import extract_keywords
from src.matcher import (
    KeywordMatcher,
    MatchResult,
    calculate_score,
    compare,
    match_resume_to_job,
    validate_job_description,
)


def test_full_match():
    result = match_resume_to_job("Python Java React Node", "python java")

    assert result.score == 100
    assert set(result.matched_keywords) == {"python", "java"}
    assert result.missing_keywords == ()


def test_partial_match_keeps_job_order():
    result = match_resume_to_job("Python", "python java react")

    assert result.score == 33
    assert result.matched_keywords == ("python",)
    assert result.missing_keywords == ("java", "react")


def test_missing_keywords_follow_first_occurrence_not_alphabet():
    result = match_resume_to_job("", "zookeeper kafka airflow kafka")
    assert result.missing_keywords == ("zookeeper", "kafka", "airflow")


@pytest.mark.parametrize("job_text", ["", None, "the and for", "a to 42 3.14"])
def test_empty_job_description_is_rejected(job_text):
    with pytest.raises(ValidationError) as exc_info:
        match_resume_to_job("Python developer", job_text)
    assert exc_info.value.user_message == "Job description is too short or empty."


def test_validate_job_description():
    validate_job_description(["python"])
    with pytest.raises(ValidationError):
        validate_job_description([])


def test_empty_resume_scores_zero():
    result = compare([], ["python", "java"])

    assert result.score == 0
    assert result.matched_keywords == ()
    assert result.missing_keywords == ("python", "java")


@pytest.mark.parametrize(
    "resume_text, job_text",
    [
        ("Python Docker AWS", "Looking for Python, AWS, Terraform and Kubernetes skills"),
        ("", "rust golang"),
        ("Everything: rust golang python", "rust golang"),
        ("sql spark", "Spark SQL Airflow dbt Snowflake Kafka Flink Hive"),
    ],
)
def test_partition_law_and_score_bounds(resume_text, job_text):
    jd_keywords = extract_keywords(job_text)
    result = compare(extract_keywords(resume_text), jd_keywords)

    matched, missing = set(result.matched_keywords), set(result.missing_keywords)
    assert matched | missing == set(jd_keywords)
    assert not matched & missing
    assert result.total_keywords == len(jd_keywords)
    assert 0 <= result.score <= 100


@pytest.mark.parametrize(
    "matched, total, expected",
    [
        (0, 5, 0),
        (5, 5, 100),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (1, 2, 50),
        (3, 8, 38),
        (1, 200, 1),
        (1, 201, 0),
    ],
)
def test_calculate_score_rounds_half_up(matched, total, expected):
    assert calculate_score(matched, total) == expected


def test_calculate_score_rejects_zero_total():
    with pytest.raises(ValueError):
        calculate_score(0, 0)


def test_match_result_is_immutable():
    result = compare(["python"], ["python"])
    assert isinstance(result, MatchResult)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.score = 0


def test_keyword_matcher_uses_its_stopwords():
    matcher = KeywordMatcher(stopwords={"senior", "engineer"})

    assert matcher.extract("Senior Python Engineer") == ["python"]
    result = matcher.match("python", "senior python engineer")
    assert result.score == 100
    assert result.missing_keywords == ()
