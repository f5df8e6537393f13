# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the SchoolSite API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.auth import routes as auth_routes
from app.auth.middleware import AuthGateMiddleware
from app.config import settings
from app.exceptions import (
    SchoolSiteException,
    schoolsite_exception_handler,
    supabase_exception_handler,
    validation_exception_handler,
)
from app.routers import (
    achievements,
    contacts,
    courses,
    dashboard,
    health,
    locale_redirect,
    news,
    teachers,
    upload,
)
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing is opened at startup: each request builds its own Supabase
    client.
    """
    logger.info(f"Starting SchoolSite API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if settings.EXPOSE_UPSTREAM_ERRORS and settings.is_production:
        logger.warning("EXPOSE_UPSTREAM_ERRORS is on in production; Supabase errors reach clients verbatim")

    yield

    logger.info("Shutting down SchoolSite API")


# Create FastAPI application
app = FastAPI(
    title="SchoolSite API",
    description="""
## School Website Content API

Backs the public school website (news, achievements, teachers, courses)
and its admin back-office. Content is stored in Supabase.

### Access

- **Reads** are public. Use `publishedOnly=true` to hide drafts.
- **Writes and uploads** need an admin session. Sign in with
  `POST /api/auth/login`; the session is kept in cookies.

### Quick Start

```bash
# Latest published news, page 2
curl "http://localhost:8000/api/news?limit=5&page=2&publishedOnly=true"

# Upload a teacher portrait
curl -X POST http://localhost:8000/api/teachers/upload \\
  -b cookies.txt -F "file=@portrait.jpg"
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Admin sign-in, sign-out and current user"},
        {"name": "News", "description": "School news items"},
        {"name": "Achievements", "description": "Student achievements"},
        {"name": "Teachers", "description": "Teacher profiles"},
        {"name": "Courses", "description": "Courses offered by the school"},
        {"name": "Contacts", "description": "Contact form submissions and the admin inbox"},
        {"name": "Upload", "description": "Image uploads for content items"},
        {"name": "Admin", "description": "Admin dashboard data"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# Session refresh for admin paths
app.add_middleware(AuthGateMiddleware)

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(SchoolSiteException)
async def handle_schoolsite_exception(request: Request, exc: SchoolSiteException):
    """Handle custom SchoolSite exceptions."""
    return await schoolsite_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_supabase_error(request: Request, exc: SupabaseClientError):
    """Handle errors reported by Supabase."""
    return await supabase_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Handle request validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": str(exc) if settings.EXPOSE_UPSTREAM_ERRORS else "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/auth",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Content endpoints
app.include_router(
    news.router,
    prefix="/api/news",
    tags=["News"]
)

app.include_router(
    achievements.router,
    prefix="/api/achievements",
    tags=["Achievements"]
)

app.include_router(
    teachers.router,
    prefix="/api/teachers",
    tags=["Teachers"]
)

app.include_router(
    courses.router,
    prefix="/api/courses",
    tags=["Courses"]
)

app.include_router(
    contacts.router,
    prefix="/api/contacts",
    tags=["Contacts"]
)

# Image upload endpoints (/api/{resource}/upload)
app.include_router(
    upload.router,
    prefix="/api",
    tags=["Upload"]
)

# Admin dashboard endpoints
app.include_router(
    dashboard.router,
    prefix="/api/admin",
    tags=["Admin"]
)

# Localized admin redirects - mounted last, its paths are the broadest
app.include_router(locale_redirect.router)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "SchoolSite API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }
