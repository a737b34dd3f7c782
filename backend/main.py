import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from routers import plan, timetable

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.project_name,
    description="Assigns substitute teachers to periods left uncovered by absent colleagues.",
    version="1.0.0",
)

# --- Add CORS Middleware for Frontend ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Router Registration ---
app.include_router(plan.router)
app.include_router(timetable.router)
logger.info("Routers registered: plan, timetable")


# --- Root Endpoint ---
@app.get("/")
def read_root():
    """Simple check to ensure the service is running."""
    return {"message": "Teacher Substitution API is running!"}


# --- Healthcheck Endpoint ---
@app.get("/health")
def health_check():
    return {"status": "ok"}
