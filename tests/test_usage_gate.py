import json
from datetime import date, timedelta
from pathlib import Path

import pytest

from client.usage_gate import (
    QuotaExceededError,
    UsageGate,
    UsageRecord,
    UsageStore,
    generate_with_quota,
)

TODAY = date(2026, 10, 19)


class Clock:
    def __init__(self, day: date) -> None:
        self.day = day

    def __call__(self) -> date:
        return self.day


def _gate(tmp_path: Path, clock: Clock) -> UsageGate:
    return UsageGate(UsageStore(tmp_path / "usage.json"), daily_limit=3, today=clock)


def test_fresh_store_reads_zero(tmp_path: Path) -> None:
    gate = _gate(tmp_path, Clock(TODAY))

    assert gate.current_count() == 0
    assert gate.remaining() == 3
    assert not gate.is_exhausted()


def test_increment_persists_date_and_count(tmp_path: Path) -> None:
    gate = _gate(tmp_path, Clock(TODAY))

    gate.increment()
    gate.increment()

    assert json.loads((tmp_path / "usage.json").read_text()) == {"date": "2026-10-19", "count": 2}
    assert gate.current_count() == 2


def test_stale_record_reads_as_zero(tmp_path: Path) -> None:
    store = UsageStore(tmp_path / "usage.json")
    store.save(UsageRecord(day=TODAY - timedelta(days=1), count=3))
    gate = UsageGate(store, today=Clock(TODAY))

    assert gate.current_count() == 0
    assert gate.increment() == 1


def test_corrupt_record_reads_as_zero(tmp_path: Path) -> None:
    path = tmp_path / "usage.json"
    path.write_text("{not json")

    assert UsageGate(UsageStore(path), today=Clock(TODAY)).current_count() == 0


@pytest.mark.asyncio
async def test_fourth_generation_is_blocked_until_next_day(tmp_path: Path) -> None:
    clock = Clock(TODAY)
    gate = _gate(tmp_path, clock)
    calls: list[int] = []

    async def generate() -> list[str]:
        calls.append(1)
        return ["name"]

    for _ in range(3):
        assert await generate_with_quota(gate, generate) == ["name"]

    with pytest.raises(QuotaExceededError):
        await generate_with_quota(gate, generate)
    assert len(calls) == 3

    clock.day = TODAY + timedelta(days=1)
    assert gate.current_count() == 0
    await generate_with_quota(gate, generate)
    assert len(calls) == 4
    assert gate.current_count() == 1


@pytest.mark.asyncio
async def test_failed_generation_consumes_no_quota(tmp_path: Path) -> None:
    gate = _gate(tmp_path, Clock(TODAY))

    async def generate() -> list[str]:
        raise RuntimeError("server said no")

    with pytest.raises(RuntimeError):
        await generate_with_quota(gate, generate)

    assert gate.current_count() == 0
