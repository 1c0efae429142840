import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Base, engine, settings
from app.core.exceptions import register_exception_handlers
from app.api.routers import auth, moods, journal, todo, planner
from app import models  # noqa: F401  registers every table on Base.metadata

# =====================================================================
# LOGGING
# =====================================================================

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("routiner")


# =====================================================================
# DATABASE INITIALIZATION
# =====================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
    yield


# =====================================================================
# CREATE APP
# =====================================================================

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    description="Mood, journal, to-do and planner tracking API",
    version="1.0.0",
    lifespan=lifespan,
)

# =====================================================================
# CORS MIDDLEWARE
# =====================================================================

origins = settings.allowed_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

logger.info(f"CORS allowed origins: {origins}")

register_exception_handlers(app)

# =====================================================================
# HEALTH CHECK (before routers)
# =====================================================================


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# =====================================================================
# ROUTES
# =====================================================================

app.include_router(auth.router)
app.include_router(moods.router)
app.include_router(journal.router)
app.include_router(todo.router)
app.include_router(planner.router)

# =====================================================================
# ROOT ENDPOINT
# =====================================================================


@app.get("/")
def root():
    """API root endpoint."""
    return {
        "message": "Welcome to Routiner API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "register": "/api/register",
            "login": "/api/login",
            "moods": "/api/moods",
            "journal": "/api/journal",
            "todo": "/api/todo",
            "planner": "/api/planner",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT)
