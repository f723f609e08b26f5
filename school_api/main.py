"""
School Records API - Main Application

FastAPI backend with:
- SQLite (through SQLAlchemy) for student and student_contact tables
- Sample data seeded on first start

Run: uvicorn school_api.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from school_api import __version__
from school_api.api.routes import api_router
from school_api.core.config import Settings, get_settings
from school_api.core.errors import ServiceError
from school_api.db.store import Store
from school_api.schemas.schemas import HealthResponse, MessageResponse
from school_api.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed data on startup, release the store on shutdown."""
    settings: Settings = app.state.settings
    app.state.store.initialize(
        reset_on_start=settings.reset_on_start,
        seed=settings.seed_sample_data,
    )
    yield
    app.state.store.close()


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid request: {location} - {first.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as {"error": <message>}."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Defaults to get_settings().
        store: An existing Store to serve from. Built from settings if omitted.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="""
        CRUD service for student records and their contact details.

        ## Features
        - **Students**: List, lookup by id or exact name, create, update, delete
        - **Student contacts**: List, lookup by student or mobile number
        - **Joined view**: A student together with its contact
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or Store.from_settings(settings)

    # CORS middleware (allow all for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/", response_model=MessageResponse, tags=["Health"])
    def greeting():
        return MessageResponse(message="Hello World!")

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check():
        """Report whether the store answers queries."""
        connected = app.state.store.ping()
        return HealthResponse(
            status="healthy" if connected else "degraded",
            store="connected" if connected else "disconnected",
        )

    return app


app = create_app()
