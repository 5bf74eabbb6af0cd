import pytest
from datetime import date, time
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.models import Base
from app.services.scheduling.types import Assignment, Shift


def get_test_monday() -> date:
    # returns a fixed Monday for deterministic tests
    return date(2025, 1, 20)


class FakeStore:
    """In-memory ScheduleStore keyed by date, counting write calls."""

    def __init__(self, shifts: list[Shift]):
        self.shifts = {s.id: s for s in shifts}
        self.assignments: dict[date, Assignment] = {}
        self.upsert_calls = 0

    def lookup_shift(self, shift_id: int) -> Optional[Shift]:
        return self.shifts.get(shift_id)

    def upsert_assignments(self, assignments: list[Assignment]) -> None:
        self.upsert_calls += 1
        for a in assignments:
            self.assignments[a.date] = a

    def query_assignments(self, start_date: date, end_date: date) -> list[Assignment]:
        return sorted(
            (a for a in self.assignments.values() if start_date <= a.date <= end_date),
            key=lambda a: a.date,
        )


@pytest.fixture
def early() -> Shift:
    return Shift(id=1, name="Early", start_time=time(6, 0), end_time=time(14, 0))


@pytest.fixture
def late() -> Shift:
    return Shift(id=2, name="Late", start_time=time(14, 0), end_time=time(22, 0))


@pytest.fixture
def night() -> Shift:
    # runs past midnight
    return Shift(id=3, name="Night", start_time=time(22, 0), end_time=time(6, 0))


@pytest.fixture
def store(early, late, night) -> FakeStore:
    return FakeStore([early, late, night])


@pytest.fixture
def db():
    """Fresh in-memory SQLite session per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
