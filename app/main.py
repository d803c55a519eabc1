"""
Main application entry point.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1.book_endpoints import router as book_router
from app.api.v1.category_endpoints import router as category_router
from app.api.v1.dependencies import (
    get_book_repository,
    get_category_repository,
    reset_dependencies,
)
from app.api.v1.schemas import HealthStatus, error_envelope
from app.domain.errors import CatalogError
from app.domain.ports import BookCatalogRepository, CategoryRepository

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # release the database handle on shutdown
    reset_dependencies()


app = FastAPI(
    title="Bookstore Catalog API",
    description="Categories, books, and budget-based book suggestions.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(category_router, prefix="/api/category", tags=["category"])
app.include_router(book_router, prefix="/api/book", tags=["book"])


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Map domain errors to the response envelope."""
    if exc.status_code >= 500:
        logger.error(
            "Store failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(exc.status_code, "Internal server error"),
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, exc.message),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies or wrongly typed fields are client errors (400)."""
    return JSONResponse(
        status_code=400,
        content=error_envelope(
            400,
            "Invalid request payload",
            {"errors": jsonable_encoder(exc.errors())},
        ),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes and wrong methods still answer with the envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Bookstore Catalog API",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health", response_model=HealthStatus)
def health_check(
    category_repo: CategoryRepository = Depends(get_category_repository),
    book_repo: BookCatalogRepository = Depends(get_book_repository),
) -> HealthStatus:
    """Check that the store answers, and report catalog sizes."""
    return HealthStatus(
        status="ok",
        categories=category_repo.count(),
        books=book_repo.count(),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
