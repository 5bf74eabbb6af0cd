"""
Pattern expander.

Turns a declarative SchedulePattern into concrete per-date assignments.
Single is strict: a missing shift raises ShiftNotFound. The bulk variants
(cycle, rotation, custom) never fail on a stale shift id; the day becomes a
rest day and is reported in ExpansionResult.skipped.
"""

import logging
from datetime import date
from typing import Callable, Optional

from .dates import iter_dates, days_between
from .exceptions import InvalidPatternParameter, ShiftNotFound
from .store import ScheduleStore
from .types import (
    Assignment,
    CustomPattern,
    CyclePattern,
    ExpansionResult,
    RotationPattern,
    SchedulePattern,
    Shift,
    SinglePattern,
    SkippedDay,
    SkipReason,
)


logger = logging.getLogger(__name__)

MIN_CYCLE_DAYS = 2
MAX_CYCLE_DAYS = 365

ShiftLookup = Callable[[int], Optional[Shift]]


def _cached(lookup: ShiftLookup) -> ShiftLookup:
    """Memoise lookups for the duration of one expansion (misses included)."""
    cache: dict[int, Optional[Shift]] = {}

    def resolve(shift_id: int) -> Optional[Shift]:
        if shift_id not in cache:
            cache[shift_id] = lookup(shift_id)
        return cache[shift_id]

    return resolve


def _emit(result: ExpansionResult, day: date, shift_id: Optional[int], resolve: ShiftLookup) -> None:
    if shift_id is None:
        result.skipped.append(SkippedDay(date=day, reason=SkipReason.REST))
        return

    shift = resolve(shift_id)
    if shift is None:
        logger.debug(f"Shift {shift_id} not found for {day}, treating as rest day")
        result.skipped.append(SkippedDay(date=day, reason=SkipReason.SHIFT_NOT_FOUND, shift_id=shift_id))
        return

    result.assignments.append(Assignment(date=day, shift=shift))


# ---------- Validation ----------

def _check_range(start_date: date, end_date: date, max_days: Optional[int]) -> None:
    if start_date > end_date:
        raise InvalidPatternParameter(f"start_date {start_date} is after end_date {end_date}")
    if max_days is not None and days_between(start_date, end_date) > max_days:
        raise InvalidPatternParameter(f"Date range longer than {max_days} days")


def validate_pattern(pattern: SchedulePattern, max_days: Optional[int] = None) -> None:
    """
    Check structural preconditions of a pattern.

    Raises:
        InvalidPatternParameter: on a reversed or over-long date range,
        cycle_days outside [2, 365], negative rest_days or an unknown variant.
    """
    if isinstance(pattern, SinglePattern):
        return

    if not isinstance(pattern, (CyclePattern, RotationPattern, CustomPattern)):
        raise InvalidPatternParameter(f"Unsupported pattern type: {type(pattern).__name__}")

    _check_range(pattern.start_date, pattern.end_date, max_days)

    if isinstance(pattern, CyclePattern):
        if pattern.cycle_days < MIN_CYCLE_DAYS or pattern.cycle_days > MAX_CYCLE_DAYS:
            raise InvalidPatternParameter(
                f"cycle_days must be between {MIN_CYCLE_DAYS} and {MAX_CYCLE_DAYS}, got {pattern.cycle_days}"
            )

    if isinstance(pattern, RotationPattern) and pattern.rest_days < 0:
        raise InvalidPatternParameter(f"rest_days must not be negative, got {pattern.rest_days}")


# ---------- Variant handlers ----------

def _expand_single(pattern: SinglePattern, lookup: ShiftLookup) -> ExpansionResult:
    shift = lookup(pattern.shift_id)
    if shift is None:
        raise ShiftNotFound(pattern.shift_id)
    return ExpansionResult(assignments=[Assignment(date=pattern.date, shift=shift)])


def _expand_cycle(pattern: CyclePattern, lookup: ShiftLookup) -> ExpansionResult:
    result = ExpansionResult()
    resolve = _cached(lookup)
    offset = 0

    for day in iter_dates(pattern.start_date, pattern.end_date):
        _emit(result, day, pattern.cycle_pattern.get(offset), resolve)
        offset = (offset + 1) % pattern.cycle_days

    return result


def _expand_rotation(pattern: RotationPattern, lookup: ShiftLookup) -> ExpansionResult:
    result = ExpansionResult()
    if not pattern.shift_ids:
        return result

    shifts = []
    for shift_id in pattern.shift_ids:
        shift = lookup(shift_id)
        if shift is None:
            logger.warning(f"Dropping unknown shift {shift_id} from rotation")
            continue
        shifts.append(shift)

    if not shifts:
        return result

    shift_index = 0
    rest_left = 0

    for day in iter_dates(pattern.start_date, pattern.end_date):
        if rest_left > 0:
            rest_left -= 1
            result.skipped.append(SkippedDay(date=day, reason=SkipReason.REST))
            continue

        result.assignments.append(Assignment(date=day, shift=shifts[shift_index]))
        shift_index = (shift_index + 1) % len(shifts)

        # full pass completed
        if shift_index == 0 and pattern.rest_days > 0:
            rest_left = pattern.rest_days

    return result


def _expand_custom(pattern: CustomPattern, lookup: ShiftLookup) -> ExpansionResult:
    result = ExpansionResult()
    resolve = _cached(lookup)

    # zip stops at whichever runs out first: the list or the date range
    for day, shift_id in zip(iter_dates(pattern.start_date, pattern.end_date), pattern.pattern):
        _emit(result, day, shift_id, resolve)

    return result


_EXPANDERS: dict[type, Callable[..., ExpansionResult]] = {
    SinglePattern: _expand_single,
    CyclePattern: _expand_cycle,
    RotationPattern: _expand_rotation,
    CustomPattern: _expand_custom,
}


# ---------- Public API ----------

def expand_pattern(
    pattern: SchedulePattern,
    lookup_shift: ShiftLookup,
    max_days: Optional[int] = None,
) -> ExpansionResult:
    """
    Expand a pattern into assignments without touching storage.

    Args:
        pattern: One of the SchedulePattern variants
        lookup_shift: shift id -> Shift, or None when it does not resolve
        max_days: longest accepted date range, unlimited when None

    Returns:
        ExpansionResult with assignments in date order and the skipped days

    Raises:
        InvalidPatternParameter: if the pattern fails validation
        ShiftNotFound: if a Single pattern's shift does not resolve
    """
    expander = _EXPANDERS.get(type(pattern))
    if expander is None:
        raise InvalidPatternParameter(f"Unsupported pattern type: {type(pattern).__name__}")

    validate_pattern(pattern, max_days)
    return expander(pattern, lookup_shift)


def apply_pattern(
    store: ScheduleStore,
    pattern: SchedulePattern,
    max_days: Optional[int] = None,
) -> ExpansionResult:
    """
    Expand a pattern and write the result to the store as one batch.

    Nothing is written when validation fails or a Single pattern's shift is
    missing. Existing assignments on the same dates are overwritten.
    """
    result = expand_pattern(pattern, store.lookup_shift, max_days)

    if result.assignments:
        store.upsert_assignments(result.assignments)

    logger.info(
        f"Applied {type(pattern).__name__}: {len(result.assignments)} written, "
        f"{len(result.skipped)} skipped ({len(result.unresolved)} unresolved)"
    )
    return result
