"""
FastAPI application entrypoint.
Read-only trivia browser over a pre-populated database. Run with: uvicorn app.main:app --reload --port 8000

API base path: routes are mounted at root (no /api/v1 prefix).
  - Questions: GET /questions?page=&page_size=, GET /questions/{id}
  - Lookups: GET /categories, GET /difficulties, GET /types
  - Health: GET /health
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.questions import router as questions_router
from app.api.lookups import router as lookups_router

app = FastAPI(
    title="Trivia Question Browser API",
    description="Paginated, read-only access to trivia questions with their category, difficulty, type and answers.",
    version="0.1.0",
)

_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(questions_router)
app.include_router(lookups_router)


@app.on_event("startup")
def startup():
    """Init SQLite schema if missing and report data-quality findings (never blocks startup)."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _log = logging.getLogger("app.main")
    _log.info("Starting (env=%s, sqlite=%s)", settings.env or "development", settings.is_sqlite)
    from app.database import init_sqlite_db, session_scope
    init_sqlite_db()
    from app.services.data_quality import find_correct_answer_overlaps
    try:
        with session_scope() as db:
            overlaps = find_correct_answer_overlaps(db)
        if overlaps:
            _log.warning("Startup: first overlapping question ids: %s", [o.question_id for o in overlaps[:5]])
    except Exception as e:
        _log.warning("Startup: data-quality check skipped (is the database seeded?): %s", e)


@app.get("/health")
def health():
    """Health check (JSON)."""
    return {"status": "ok", "message": "Trivia Question Browser API"}
