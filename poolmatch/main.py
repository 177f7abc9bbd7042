"""
FastAPI Application Entry Point

Serves the shipment pooling and carrier matching engine over HTTP.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from poolmatch.api import API_VERSION, api_router
from poolmatch.core.config import settings
from poolmatch.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    The engine holds no resources, so startup only configures logging.
    """
    setup_logging()
    logger.info(f"Pooling service starting up (env={settings.APP_ENV})")

    yield

    logger.info("Pooling service shutdown complete")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="Pooling Service - Shipment Pooling & Carrier Matching",
    description="Deterministic shipment pooling and carrier ranking",
    version=API_VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


# Request validation handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    422 with location, message and type per error.

    Offending inputs are not echoed: NaN or Infinity from the request body
    cannot be serialized back as JSON.
    """
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info(f"Rejected request to {request.url.path}: {len(errors)} validation errors")
    return JSONResponse(status_code=422, content={"detail": errors})


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "service": "Pooling Service",
        "status": "running",
        "version": API_VERSION
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "pooling_service",
        "components": {
            "api": "ok",
            "engine": "ok"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
