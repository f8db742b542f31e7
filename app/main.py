# app/main.py
import uvicorn
import os
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.database import engine, Base
from app.core.exceptions import AppError, AuthError, InternalError
from app.api.v1.api import api_router
# Register every table on Base.metadata
from app.models import category, currency, record, user  # noqa: F401

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Readable names for pydantic error types, keyed by error["type"]
TYPE_MESSAGES = {
    "int_parsing": "must be an integer",
    "int_type": "must be an integer",
    "int_from_float": "must be an integer",
    "float_parsing": "must be a number",
    "float_type": "must be a number",
    "string_type": "must be a string",
}

async def create_db_and_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    openapi_tags=[
        {"name": "Authentication", "description": "Signup, login and token introspection"},
        {"name": "User Management", "description": "Users and their default currency"},
        {"name": "Health", "description": "Liveness probe"},
    ],
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------------------------------------------
# ERROR HANDLERS
# ------------------------------------------------------------
def describe_validation_error(error: dict) -> str:
    """Turn the first pydantic error into a single message naming the field"""
    loc = [str(part) for part in error.get("loc", ())]
    source = loc[0] if loc else ""
    field = ".".join(loc[1:])

    if source in ("path", "query"):
        return f"Invalid {field.replace('_', ' ')}"
    if error.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    if not field:
        return "Request body is required" if error.get("type") == "missing" else "Request body must be a JSON object"
    if error.get("type") == "missing":
        return f"Field '{field}' is required"

    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        reason = str(ctx["error"])
    else:
        reason = TYPE_MESSAGES.get(error.get("type"), f"is invalid: {error.get('msg')}")
    return f"Field '{field}' {reason}"

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, InternalError):
        logger.error(f"Internal error on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"message": "Internal server error"})

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = describe_validation_error(errors[0]) if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Anything unexpected becomes a generic 500; details stay in the log"""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

# ------------------------------------------------------------
# ROUTES
# ------------------------------------------------------------
app.include_router(api_router)

# ------------------------------------------------------------
# STARTUP EVENT
# ------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    """Startup event to create database tables"""
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT}), auth enabled: {settings.AUTH_ENABLED}")
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()
        logger.info("✅ Database tables created successfully")

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("app.main:app", host="0.0.0.0", port=port, reload=False)
