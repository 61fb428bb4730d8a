import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from grease.api import auth, semesters, events, attendance, absence_requests, grades
from grease.core.config import settings
from grease.schemas.event import UnknownEventType

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Grease")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(semesters.router, prefix="/api/semesters", tags=["semesters"])
app.include_router(events.router, prefix="/api/events", tags=["events"])
app.include_router(attendance.router, prefix="/api/events", tags=["attendance"])
app.include_router(absence_requests.router, prefix="/api/absence-requests", tags=["absence requests"])
app.include_router(grades.router, prefix="/api/grades", tags=["grades"])


@app.exception_handler(UnknownEventType)
async def unknown_event_type_handler(request: Request, exc: UnknownEventType):
    # bad row in the event table
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})
