"""Application entry point for the Diet Plan API.

Defines the FastAPI app, request logging middleware and exception handlers,
and includes the routers from the `api` package. The `lifespan` handler
creates the database and seeds the food catalog on startup.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from database import init_db, get_read_session
from core.exceptions import DatabaseError
from core.error_handlers import register_exception_handlers
from core.logger import get_logger
from api.foods import router as foods_router
from api.diet_plans import router as diet_plans_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: seed the catalog before serving requests."""
    init_db()
    yield


app = FastAPI(title="Diet Plan API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health(db: Session = Depends(get_read_session)):
    """Return basic health status and database connectivity.

    Raises:
        DatabaseError: If the database cannot be queried.
    """
    try:
        db.execute(text("SELECT 1"))
    except Exception as exc:
        logger.exception("Health check failed")
        raise DatabaseError(f"Database health check failed: {exc}", operation="health_check") from exc
    return {"status": "healthy", "database": "connected"}


app.include_router(foods_router)
app.include_router(diet_plans_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
