"""Dismissable, non-blocking user notices."""

import itertools
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

DEFAULT_TTL_SECONDS = 5.0


class NoticeKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notice:
    id: int
    kind: NoticeKind
    message: str
    posted_at: float
    # None means the notice stays until dismissed
    ttl: float | None = DEFAULT_TTL_SECONDS

    def expired(self, now: float) -> bool:
        return self.ttl is not None and now - self.posted_at >= self.ttl


class NoticeBoard:
    """Ordered collection of notices a UI renders as toasts."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._ids = itertools.count(1)
        self._notices: list[Notice] = []

    def post(
        self, kind: NoticeKind, message: str, ttl: float | None = DEFAULT_TTL_SECONDS
    ) -> Notice:
        notice = Notice(
            id=next(self._ids),
            kind=kind,
            message=message,
            posted_at=self._clock(),
            ttl=ttl,
        )
        self._notices.append(notice)
        return notice

    def success(self, message: str) -> Notice:
        return self.post(NoticeKind.SUCCESS, message)

    def error(self, message: str, sticky: bool = False) -> Notice:
        return self.post(NoticeKind.ERROR, message, ttl=None if sticky else DEFAULT_TTL_SECONDS)

    def dismiss(self, notice_id: int) -> bool:
        before = len(self._notices)
        self._notices = [n for n in self._notices if n.id != notice_id]
        return len(self._notices) != before

    @property
    def active(self) -> list[Notice]:
        """Notices still on screen; expired transient ones are pruned."""
        now = self._clock()
        self._notices = [n for n in self._notices if not n.expired(now)]
        return list(self._notices)

    @property
    def latest(self) -> Notice | None:
        active = self.active
        return active[-1] if active else None
