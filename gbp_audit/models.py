"""ProfileMetrics and audit dataclasses: the core data structures of an audit."""

import math
from dataclasses import dataclass, field
from typing import Any


def _number(value: Any) -> int | float:
    """A JSON number as it arrived: 50 -> 50, 50.5 -> 50.5, 50.0 -> 50."""
    number = float(value or 0)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return int(number) if number.is_integer() else number


@dataclass
class PostsInfo:
    recent_post: bool = False


@dataclass
class QAndAInfo:
    total_questions: int | float = 0
    answered_questions: int | float = 0


@dataclass
class ProfileMetrics:
    business_name: str
    address: str
    is_verified: bool = False
    rating: float = 0.0  # 0.0 - 5.0
    review_count: int | float = 0
    photo_count: int | float = 0
    has_website: bool = False
    posts: PostsInfo | None = None
    q_and_a: QAndAInfo | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProfileMetrics":
        """
        Build metrics from the audit server's camelCase JSON body.

        Missing scalars fall back to falsy defaults; missing or null
        ``posts`` / ``qAndA`` objects stay ``None``.
        """
        posts = data.get("posts")
        q_and_a = data.get("qAndA")

        return cls(
            business_name=str(data.get("businessName") or ""),
            address=str(data.get("address") or ""),
            is_verified=data.get("isVerified") is True,
            rating=float(_number(data.get("rating"))),
            review_count=_number(data.get("reviewCount")),
            photo_count=_number(data.get("photoCount")),
            has_website=data.get("hasWebsite") is True,
            posts=(
                PostsInfo(recent_post=posts.get("recentPost") is True)
                if isinstance(posts, dict)
                else None
            ),
            q_and_a=(
                QAndAInfo(
                    total_questions=_number(q_and_a.get("totalQuestions")),
                    answered_questions=_number(q_and_a.get("answeredQuestions")),
                )
                if isinstance(q_and_a, dict)
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "businessName": self.business_name,
            "address": self.address,
            "isVerified": self.is_verified,
            "rating": self.rating,
            "reviewCount": self.review_count,
            "photoCount": self.photo_count,
            "hasWebsite": self.has_website,
        }
        if self.posts is not None:
            data["posts"] = {"recentPost": self.posts.recent_post}
        if self.q_and_a is not None:
            data["qAndA"] = {
                "totalQuestions": self.q_and_a.total_questions,
                "answeredQuestions": self.q_and_a.answered_questions,
            }
        return data

    @property
    def has_recent_post(self) -> bool:
        return self.posts is not None and self.posts.recent_post


@dataclass(frozen=True)
class Recommendation:
    title: str
    text: str


@dataclass(frozen=True)
class AuditResult:
    score: int
    recommendations: tuple[Recommendation, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "recommendations": [
                {"title": rec.title, "text": rec.text} for rec in self.recommendations
            ],
        }


@dataclass
class Report:
    """Metrics plus the audit computed from them, as shown in the results view."""

    metrics: ProfileMetrics
    audit: AuditResult

    def to_dict(self) -> dict[str, Any]:
        return {**self.metrics.to_dict(), "audit": self.audit.to_dict()}
