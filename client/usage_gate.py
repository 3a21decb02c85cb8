from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import TypeVar

logger = logging.getLogger(__name__)

DEFAULT_DAILY_LIMIT = 3

T = TypeVar("T")


class QuotaExceededError(RuntimeError):
    """Raised when the daily generation quota has been used up."""

    public_message = "오늘의 무료 사용 횟수를 모두 사용했습니다"


@dataclass(frozen=True)
class UsageRecord:
    day: date
    count: int


class UsageStore:
    """Persist the current usage record as a small JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> UsageRecord | None:
        if not self._path.exists():
            return None
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
            return UsageRecord(day=date.fromisoformat(payload["date"]), count=int(payload["count"]))
        except (OSError, ValueError, KeyError, TypeError):
            logger.warning("Ignoring unreadable usage record at %s", self._path)
            return None

    def save(self, record: UsageRecord) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"date": record.day.isoformat(), "count": record.count}
        self._path.write_text(json.dumps(payload), encoding="utf-8")


class UsageGate:
    """Advisory daily quota kept on the caller's machine.

    A record from an earlier day reads as zero usage, so the count resets
    lazily on the first read of a new day. Nothing stops a user from deleting
    the file; this is a usage nudge, not an access control.
    """

    def __init__(
        self,
        store: UsageStore,
        daily_limit: int = DEFAULT_DAILY_LIMIT,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._daily_limit = daily_limit
        self._today = today

    def today(self) -> date:
        return self._today()

    @property
    def daily_limit(self) -> int:
        return self._daily_limit

    def current_count(self, day: date | None = None) -> int:
        day = day or self.today()
        record = self._store.load()
        if record is None or record.day != day:
            return 0
        return record.count

    def remaining(self, day: date | None = None) -> int:
        return max(self._daily_limit - self.current_count(day), 0)

    def is_exhausted(self, day: date | None = None) -> bool:
        return self.current_count(day) >= self._daily_limit

    def check(self, day: date | None = None) -> None:
        if self.is_exhausted(day):
            raise QuotaExceededError(f"Daily limit of {self._daily_limit} generations reached.")

    def increment(self, day: date | None = None) -> int:
        day = day or self.today()
        count = self.current_count(day) + 1
        self._store.save(UsageRecord(day=day, count=count))
        return count


async def generate_with_quota(
    gate: UsageGate,
    generate: Callable[[], Awaitable[T]],
) -> T:
    """Run ``generate`` only while quota remains; count it only if it succeeds."""
    day = gate.today()
    gate.check(day)
    result = await generate()
    gate.increment(day)
    return result
