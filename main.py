import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from core.exceptions import TournamentException
from core.middleware import RequestLoggingMiddleware
from core.rate_limit import RateLimitMiddleware

from db import Base, engine, SessionLocal
from core.config import settings
from core.logging import logger

from models.tournament import Tournament  # noqa: F401
from models.registration import Registration  # noqa: F401
from models.admin import Admin  # noqa: F401
from models.activity_log import ActivityLog  # noqa: F401

from api.crud.admin_crud import seed_default_admin
from api.crud.tournament_crud import seed_tournaments

# ROUTES
from api.routers.health import router as health_router
from api.routers.auth import router as auth_router
from api.routers.tournaments import router as tournaments_router
from api.routers.registrations import router as registrations_router
from api.routers.activity_logs import router as activity_logs_router


app = FastAPI(title="Tournament Registration API", version="1.0.0")

# Rate limiting is the outermost guard
if settings.rate_limit_enabled:
    app.add_middleware(
        RateLimitMiddleware,
        requests_per_minute=settings.rate_limit_per_minute,
        requests_per_hour=settings.rate_limit_per_hour,
    )

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TournamentException)
async def tournament_exception_handler(request: Request, exc: TournamentException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix from the location
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"field": ".".join(location), "message": message})
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "details": details}
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(
        status_code=400,
        content={"error": str(exc)}
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    error_traceback = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {error_traceback}")
    content = {"error": "An unexpected error occurred. Please try again later."}
    if settings.is_development:
        content["traceback"] = error_traceback
    return JSONResponse(status_code=500, content=content)


@app.on_event("startup")
async def startup_event():
    logger.info("Starting up application...")

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    db = SessionLocal()
    try:
        seed_default_admin(db, settings.admin_username, settings.admin_password)
        seed_tournaments(db, settings.default_qr_code_url)
    finally:
        db.close()


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down application...")


app.include_router(health_router)
app.include_router(auth_router, tags=["Authentication"])
app.include_router(tournaments_router)
app.include_router(registrations_router)
app.include_router(activity_logs_router)
