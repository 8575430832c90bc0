# /gradebook/main.py

# --- Core FastAPI Imports ---
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    admin_router,
    classes_router,
    curriculum_router,
    reports_router,
    students_router,
)

# --- Startup Imports ---
from .core.config import USE_SQL_STORE
from .core.logging_config import init_logging
from .db.database import init_db

logger = logging.getLogger(__name__)

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    if USE_SQL_STORE:
        init_db()
    logger.info("Gradebook backend started (store: %s).", "sql" if USE_SQL_STORE else "json")
    yield
    # This code runs ONCE when the application shuts down.

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Gradebook Backend API",
    description="Report cards, grade entry, curriculum administration and year-end promotion for a school grade-book.",
    version="1.0.0",
    lifespan=lifespan
)

init_logging(app)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(reports_router.router, prefix="/api/reports", tags=["Reports"])
app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(curriculum_router.router, prefix="/api/curriculum", tags=["Curriculum"])
app.include_router(admin_router.router, prefix="/api/admin", tags=["Administration"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Gradebook Backend is running!", "version": app.version}
