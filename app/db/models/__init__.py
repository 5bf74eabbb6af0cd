from app.db.database import Base

# Import models
from app.db.models.shifts import Shifts
from app.db.models.schedules import Schedules

__all__ = [
    "Base",
    # Models
    "Shifts",
    "Schedules",
]
