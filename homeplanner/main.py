from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homeplanner.api.routers import api_router
from homeplanner.core.config import settings
from homeplanner.core.logging_config import get_logger, setup_logging
from homeplanner.db.init_db import ensure_seed_data
from homeplanner.db.session import SessionLocal, engine

setup_logging(settings)
logger = get_logger(__name__)

app = FastAPI(title="Home Planner API")

origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}


@app.on_event("startup")
def on_startup() -> None:
    logger.info("Starting Home Planner API", extra={"database_url": engine.url.render_as_string(hide_password=True)})
    db = SessionLocal()
    try:
        ensure_seed_data(db)
    finally:
        db.close()
