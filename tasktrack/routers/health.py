from fastapi import APIRouter, Request
from sqlmodel import text

from tasktrack.core.exceptions import TaskTrackError

router = APIRouter(tags=["health"])


@router.get("/")
def root():
    return {"success": True, "message": "Task Management API is running"}


@router.get("/health")
def health_app():
    return {"ok": True}


@router.get("/health/db")
def health_db(request: Request):
    # Migration is a deployment concern. Runtime only verifies DB connectivity.
    try:
        with request.app.state.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception:
        raise TaskTrackError("Database connection failed")
