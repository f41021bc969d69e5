"""Orchestration: link -> validate -> fetch metrics -> score -> report.

The session moves through explicit states instead of loading/error/report
flags:

    Idle -> Validating -> Requesting -> Succeeded(report)
                 |             |
                 +-------------+-----> Failed(kind)

A validation failure keeps whatever report was on screen; a server or
connectivity failure leaves no report, since it is cleared when the request
starts. Nothing stops a caller from submitting while a request is in flight;
whichever request finishes last decides the final state.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from .client import fetch_profile_metrics
from .config import Settings, load_settings
from .errors import SERVER_MESSAGE, AuditError, ErrorKind, ValidationError
from .models import ProfileMetrics, Report
from .scoring import score

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, Settings], Awaitable[ProfileMetrics]]


@dataclass(frozen=True)
class Idle:
    link: str = ""
    report = None


@dataclass(frozen=True)
class Validating:
    link: str
    report: Report | None = None


@dataclass(frozen=True)
class Requesting:
    link: str
    report = None


@dataclass(frozen=True)
class Succeeded:
    link: str
    report: Report


@dataclass(frozen=True)
class Failed:
    link: str
    kind: ErrorKind
    message: str
    report: Report | None = None


AuditState = Idle | Validating | Requesting | Succeeded | Failed


def validate_link(raw_link: str | None, fragment: str) -> str:
    """
    Check that a link looks like a GBP share link.

    Returns:
        The link with surrounding whitespace removed

    Raises:
        ValidationError: empty link, or the share-link host fragment is missing
    """
    link = (raw_link or "").strip()
    if not link or fragment not in link:
        raise ValidationError(detail=f"Rejected link {link!r}: expected {fragment!r}")
    return link


class AuditSession:
    """Holds the state of the audit tool for one user."""

    def __init__(self, settings: Settings | None = None, fetch: Fetcher | None = None):
        self.settings = settings or load_settings()
        self._fetch = fetch or (lambda link, settings: fetch_profile_metrics(link, settings))
        self._state: AuditState = Idle()

    @property
    def state(self) -> AuditState:
        return self._state

    @property
    def link(self) -> str:
        return self._state.link

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Requesting)

    @property
    def error(self) -> str:
        return self._state.message if isinstance(self._state, Failed) else ""

    @property
    def report(self) -> Report | None:
        return self._state.report

    async def fetch(self, link: str) -> ProfileMetrics:
        """Request metrics for an already validated link."""
        return await self._fetch(link, self.settings)

    async def submit(self, raw_link: str) -> AuditState:
        """
        Run one audit for a user-entered link.

        Issues at most one request. Errors are recorded in the returned
        Failed state rather than raised.
        """
        previous_report = self._state.report
        self._state = Validating(raw_link, previous_report)

        try:
            link = validate_link(raw_link, self.settings.link_fragment)
        except ValidationError as e:
            logger.info("%s", e)
            self._state = Failed(raw_link, e.kind, e.message, previous_report)
            return self._state

        requesting = Requesting(link)
        self._state = requesting
        try:
            metrics = await self.fetch(link)
            audit = score(metrics)
            self._state = Succeeded(link, Report(metrics=metrics, audit=audit))
            logger.info(
                "Audit complete for %r: score %d, %d recommendations",
                metrics.business_name, audit.score, len(audit.recommendations),
            )
        except AuditError as e:
            self._state = Failed(link, e.kind, e.message)
        finally:
            if self._state is requesting:
                # An unexpected exception is escaping; do not leave the session loading.
                self._state = Failed(link, ErrorKind.SERVER, SERVER_MESSAGE)

        return self._state
