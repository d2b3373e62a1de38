"""
FastAPI application entry point.

Assembles the planning service: logging, CORS and the planning router.
Run with ``uvicorn journalmate.main:app`` or ``python -m journalmate.main``.
"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from journalmate.shared.logging.config import configure_service_logging
from journalmate.slot_filling.planning_api import router as planning_router


API_VERSION = "0.1.0"

# JOURNALMATE_LOG_JSON=1 switches service logs to JSON lines
configure_service_logging(json_lines=os.getenv("JOURNALMATE_LOG_JSON") == "1")


app = FastAPI(
    title="JournalMate Planner",
    description="Asks one domain question at a time, then generates an activity plan",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("JOURNALMATE_CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(planning_router)


@app.get("/")
async def root():
    """Service description and available routes."""
    return {
        "name": app.title,
        "version": API_VERSION,
        "routes": {
            "planning": "/api/planning",
            "domains": "/api/planning/domains/{domain}/questions",
        },
    }


@app.get("/health")
async def health():
    """Global health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("JOURNALMATE_HOST", "0.0.0.0"),
        port=int(os.getenv("JOURNALMATE_PORT", "8000")),
    )
