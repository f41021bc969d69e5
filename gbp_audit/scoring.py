"""Optimization scoring for a Google Business Profile.

Strategy:
- Seven independent criteria, each worth a fixed number of points
- A passing criterion adds its points; a failing one adds exactly one recommendation
- No partial credit, no interaction between criteria
- Recommendations keep the order of CRITERIA
"""

from dataclasses import dataclass
from typing import Callable

from .models import AuditResult, ProfileMetrics, Recommendation


@dataclass(frozen=True)
class Criterion:
    name: str
    points: int
    passes: Callable[[ProfileMetrics], bool]
    title: str
    message: str  # str.format template, fields come from ProfileMetrics

    def recommendation(self, metrics: ProfileMetrics) -> Recommendation:
        return Recommendation(
            title=self.title,
            text=self.message.format(
                review_count=metrics.review_count,
                photo_count=metrics.photo_count,
            ),
        )


def _answers_most_questions(metrics: ProfileMetrics) -> bool:
    """More than 80% of Q&A questions answered. Never divides by zero."""
    qa = metrics.q_and_a
    if qa is None or qa.total_questions <= 0:
        return False
    return qa.answered_questions / qa.total_questions > 0.8


CRITERIA: tuple[Criterion, ...] = (
    Criterion(
        name="verification",
        points=10,
        passes=lambda m: m.is_verified is True,
        title="Profile Verification",
        message=(
            "The profile is not verified. Verification is crucial for building "
            "trust and unlocking all GBP features."
        ),
    ),
    Criterion(
        name="rating",
        points=15,
        passes=lambda m: m.rating >= 4.0,
        title="Improve Star Rating",
        message=(
            "The average rating is below 4.0. Focus on improving customer service "
            "and encouraging happy customers to leave reviews."
        ),
    ),
    Criterion(
        name="review_volume",
        points=15,
        passes=lambda m: m.review_count > 50,
        title="Increase Review Count",
        message=(
            "With only {review_count} reviews, the profile could benefit from a "
            "proactive strategy to acquire more."
        ),
    ),
    Criterion(
        name="photo_volume",
        points=20,
        passes=lambda m: m.photo_count > 20,
        title="Upload More Photos",
        message="The profile has only {photo_count} photos. Aim for at least 20 high-quality images.",
    ),
    Criterion(
        name="posting_activity",
        points=15,
        passes=lambda m: m.has_recent_post,
        title="Utilize Google Posts",
        message="No recent Google Posts found. Posting weekly updates keeps your profile active.",
    ),
    Criterion(
        name="q_and_a",
        points=10,
        passes=_answers_most_questions,
        title="Engage with Q&A",
        message="Not all questions in the Q&A section have been answered.",
    ),
    Criterion(
        name="web_presence",
        points=15,
        passes=lambda m: m.has_website is True,
        title="Add a Website",
        message="The profile does not have a website listed.",
    ),
)

MAX_SCORE = sum(c.points for c in CRITERIA)


def score(metrics: ProfileMetrics) -> AuditResult:
    """
    Score a profile against every criterion.

    Args:
        metrics: Profile metrics from the audit server

    Returns:
        AuditResult with the summed points and one recommendation per failed criterion
    """
    total = 0
    recommendations: list[Recommendation] = []

    for criterion in CRITERIA:
        if criterion.passes(metrics):
            total += criterion.points
        else:
            recommendations.append(criterion.recommendation(metrics))

    return AuditResult(score=total, recommendations=tuple(recommendations))


def score_band(value: int) -> str:
    """Classify a score: 'good' (>= 80), 'fair' (>= 50) or 'poor'."""
    if value >= 80:
        return "good"
    if value >= 50:
        return "fair"
    return "poor"
