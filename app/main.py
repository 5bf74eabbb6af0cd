import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.core.config import settings
from app.db.database import init_db
from app.api.routes import shifts, schedules, patterns, statistics, exports

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Shift Roster API", version="0.1.0", debug=settings.DEBUG, lifespan=lifespan)

app.include_router(shifts.router, prefix="/api/v1")
app.include_router(schedules.router, prefix="/api/v1")
app.include_router(patterns.router, prefix="/api/v1")
app.include_router(statistics.router, prefix="/api/v1")
app.include_router(exports.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
