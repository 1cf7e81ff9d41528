# app/main.py
import os
import time
import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from app.cache import Revalidator
from app.db import create_db_engine, make_session_factory
from app.routers.workouts import router as workouts_router
from app.routers.exercises import router as exercises_router
from app.routers.sets import router as sets_router

log = logging.getLogger("uvicorn")


def create_app(session_factory: Optional[sessionmaker] = None) -> FastAPI:
    """Build the API around an explicit store handle.

    Without a factory one is made from settings (DB_URL / DB_* env vars).
    """
    app = FastAPI(
        title="Lifting Diary API",
        openapi_tags=[
            {"name": "workouts", "description": "Workout sessions"},
            {"name": "exercises", "description": "Per-user exercise catalog"},
            {"name": "sets", "description": "Sets logged per workout exercise"},
        ],
    )
    app.state.session_factory = session_factory or make_session_factory(create_db_engine())
    app.state.revalidator = Revalidator()

    # CORS (relax for local dev; tighten origins in prod via env)
    allow_origins = os.getenv("ALLOW_ORIGINS", "*").split(",")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id_and_log(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = req_id
        log.info("rid=%s %s %s -> %s in %.1fms",
                 req_id, request.method, request.url.path, response.status_code, duration_ms)
        return response

    @app.get("/")
    def root():
        return {"ok": True, "name": "Lifting Diary API"}

    @app.get("/ping")
    def ping():
        return {"pong": True}

    @app.get("/healthz")
    def healthz(request: Request):
        # Quick DB sanity check
        try:
            with request.app.state.session_factory() as db:
                db.execute(text("SELECT 1"))
            return {"status": "ok"}
        except Exception as e:
            return {"status": "degraded", "error": str(e)}

    @app.get("/version")
    def version():
        return {"version": os.getenv("API_VERSION", "dev")}

    # Routers
    app.include_router(workouts_router)
    app.include_router(exercises_router)
    app.include_router(sets_router)
    return app


app = create_app()
