import pytest
from portal.models.application import ApplicationStatus
from portal.services.scoring import (
    KeywordOverlapScorer,
    count_matches,
    decide_status,
    score_from_matches,
    tokenize,
)

scorer = KeywordOverlapScorer()

@pytest.mark.parametrize("matches, expected", [
    (0, 0.5),
    (5, 0.6125),
    (10, 0.725),
    (20, 0.95),
    (35, 0.95),
])
def test_score_from_matches(matches, expected):
    assert score_from_matches(matches) == pytest.approx(expected)

def test_tokenize_lowercases_and_splits_on_punctuation():
    assert tokenize("React, TypeScript & CSS!") == ["react", "typescript", "css", ""]

def test_empty_texts_score_base():
    assert scorer.score("", "") == pytest.approx(0.5)
    assert scorer.score("", "python developer") == pytest.approx(0.5)

def test_short_tokens_do_not_count():
    assert count_matches("api css sql", "api css sql") == 0

def test_duplicate_resume_tokens_count_each_time():
    assert count_matches("python python python", "python") == 3
    assert count_matches("python", "python python python") == 1

def test_score_is_not_commutative():
    assert scorer.score("java java", "java") != scorer.score("java", "java java")

def test_five_word_overlap_stays_below_threshold():
    resume_text = "React TypeScript frontend developer experience"
    job_text = "We need a React TypeScript frontend developer with experience."
    score = scorer.score(resume_text, job_text)
    assert score == pytest.approx(0.6125)
    assert decide_status(score) == ApplicationStatus.APPLIED

def test_score_clamps_at_maximum():
    words = " ".join(f"skill{i:02d}" for i in range(40))
    assert scorer.score(words, words) == pytest.approx(0.95)

def test_score_range():
    for resume_text, job_text in [("", "x"), ("lots of words here", "words here"), ("a " * 100, "a")]:
        assert 0.5 <= scorer.score(resume_text, job_text) <= 0.95

@pytest.mark.parametrize("score, status", [
    (0.5, ApplicationStatus.APPLIED),
    (0.6999, ApplicationStatus.APPLIED),
    (0.70, ApplicationStatus.SHORTLISTED),
    (0.95, ApplicationStatus.SHORTLISTED),
])
def test_decide_status_threshold(score, status):
    assert decide_status(score) == status
