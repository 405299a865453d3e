"""
FastAPI application for the webinar service.

Serves the read side of the webinar platform: browsing, detail pages and
the host dashboard, all gated by the access policy engine.

Usage:
    uvicorn app.main:app --reload --port 8081
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.webinars.routes import router as webinars_router
from webinar_core.auth.middleware import AuthMiddleware
from webinar_core.config import settings
from webinar_core.logging import setup_logging

# Initialize logging
setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Webinar Hub",
    description="Webinar catalog with role- and tier-based access policy",
    version="1.0.0",
)

# Viewer resolution (anonymous browsing controlled by ALLOW_ANONYMOUS)
app.add_middleware(AuthMiddleware, allow_anonymous=settings.ALLOW_ANONYMOUS)

# NOTE: CORS must be the last middleware added so it runs FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(webinars_router)


@app.get("/health")
def health():
    """
    Health check endpoint.

    Returns:
        dict: Status and service information.
    """
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": app.version}
