"""
Resume-to-job similarity scoring and the shortlisting decision.

The shipped scorer is a keyword-overlap heuristic: every qualifying resume
token that also occurs in the job description counts as one match, the
count is capped, and the ratio is mapped linearly onto a fixed score band.
It stands in for a real text-similarity model; anything implementing
``SimilarityScorer`` can replace it without touching the callers.
"""
import re
from typing import List, Protocol

from portal.models.application import ApplicationStatus

MIN_TOKEN_LENGTH = 4        # tokens must be longer than 3 characters
MATCH_CAP = 20              # matches beyond this add nothing
BASE_SCORE = 0.5
MAX_ADDITIONAL_SCORE = 0.45
SHORTLIST_THRESHOLD = 0.70

_NON_WORD = re.compile(r"\W+", re.ASCII)


class SimilarityScorer(Protocol):
    def score(self, resume_text: str, job_text: str) -> float:
        ...


def tokenize(text: str) -> List[str]:
    """Lowercase and split on runs of non-word characters."""
    return _NON_WORD.split(text.lower())


def count_matches(resume_text: str, job_text: str) -> int:
    """
    Count resume tokens (longer than 3 chars) that appear anywhere in the job text.

    Repeated resume tokens are counted each time; repeats in the job text
    add nothing.
    """
    job_tokens = set(tokenize(job_text))
    return sum(
        1 for token in tokenize(resume_text)
        if len(token) >= MIN_TOKEN_LENGTH and token in job_tokens
    )


def score_from_matches(match_count: int) -> float:
    match_ratio = min(match_count / MATCH_CAP, 1)
    return BASE_SCORE + match_ratio * MAX_ADDITIONAL_SCORE


class KeywordOverlapScorer:
    def score(self, resume_text: str, job_text: str) -> float:
        return score_from_matches(count_matches(resume_text or "", job_text or ""))


def decide_status(similarity_score: float) -> ApplicationStatus:
    if similarity_score >= SHORTLIST_THRESHOLD:
        return ApplicationStatus.SHORTLISTED
    return ApplicationStatus.APPLIED


def get_scorer() -> SimilarityScorer:
    return KeywordOverlapScorer()
