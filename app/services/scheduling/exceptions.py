"""
Errors raised by the scheduling services.
Routes translate these into HTTP responses.
"""

from typing import Optional


class SchedulingError(Exception):
    pass


class ShiftNotFound(SchedulingError):
    def __init__(self, shift_id: int, message: Optional[str] = None):
        self.shift_id = shift_id
        super().__init__(message or f"Shift {shift_id} not found")


class InvalidPatternParameter(SchedulingError):
    pass


class ShiftNameExists(SchedulingError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Shift name '{name}' already exists")
