"""
Seed script for the roster development database.

- Four default shifts (Early, Middle, Late, Night - Night runs past midnight)
- Current month filled with an Early/Middle/Late rotation and 2 rest days

Run with: python -m scripts.seed_demo
"""

import sys
from datetime import date, time

from sqlalchemy import delete

from app.db.database import SessionLocal, init_db
from app.db.models import Shifts, Schedules
from app.services.scheduling import PRESET_COLORS, RotationPattern, SqlScheduleStore, apply_pattern
from app.services.scheduling.dates import month_bounds


DEFAULT_SHIFTS = [
    ("Early", time(6, 0), time(14, 0), PRESET_COLORS[0], "Morning opening"),
    ("Middle", time(10, 0), time(18, 0), PRESET_COLORS[1], None),
    ("Late", time(14, 0), time(22, 0), PRESET_COLORS[2], "Closing"),
    ("Night", time(22, 0), time(6, 0), PRESET_COLORS[3], "Overnight"),
]


def clear_tables(db):
    """Delete schedules first, they reference shifts."""
    print("Clearing tables...")
    db.execute(delete(Schedules))
    db.execute(delete(Shifts))
    db.commit()


def seed_shifts(db) -> list[int]:
    print("Seeding shifts...")
    ids = []
    for name, start, end, color, description in DEFAULT_SHIFTS:
        shift = Shifts(
            name=name,
            start_time=start,
            end_time=end,
            color=color,
            description=description,
            is_active=True,
        )
        db.add(shift)
        db.flush()
        ids.append(shift.id)
    db.commit()
    print(f"  Created {len(ids)} shifts")
    return ids


def seed_current_month(db, shift_ids: list[int]):
    print("Applying rotation for current month...")
    today = date.today()
    start, end = month_bounds(today.year, today.month)
    pattern = RotationPattern(start_date=start, end_date=end, shift_ids=shift_ids[:3], rest_days=2)
    result = apply_pattern(SqlScheduleStore(db), pattern)
    print(f"  {len(result.assignments)} work days, {len(result.skipped)} rest days ({start} to {end})")


def main():
    """Main seed function."""
    print("\n" + "="*50)
    print("Roster Database Seeder")
    print("="*50 + "\n")

    response = input("This will DELETE ALL EXISTING SHIFTS AND SCHEDULES. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Aborted.")
        sys.exit(0)

    init_db()
    db = SessionLocal()

    try:
        clear_tables(db)
        shift_ids = seed_shifts(db)
        seed_current_month(db, shift_ids)

        print("\n" + "="*50)
        print("Seeding complete!")
        print("="*50 + "\n")

    except Exception as e:
        db.rollback()
        print(f"\nError during seeding: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
