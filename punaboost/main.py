import logging
from collections import defaultdict
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from punaboost.core import config
from punaboost.core.logging_config import setup_logging

# ✅ Import All API Routes
from punaboost.api.routes import (
    account,
    candidate,
    city,
    company,
    country,
    health,
    industry,
    job,
    job_application,
    job_recommendation,
    resume,
    skill,
)
from punaboost.db.init_db import init_db
from punaboost.db.migrate import run_migrations

logger = logging.getLogger(__name__)

VALIDATION_TITLE = "One or more validation errors occurred."


# ============================================
# ✅ STARTUP
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL, config.LOG_DIR)
    if config.RUN_MIGRATIONS == "1":
        run_migrations()
    init_db()
    logger.info("PunaBoost API started")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="PunaBoost API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# ============================================
# ✅ ERROR SHAPES
# ============================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"message": ...}; structured details pass through unchanged."""
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


def _field_key(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "form", "header")]
    return ".".join(parts) or "body"


def _clean_message(message: str) -> str:
    prefix = "Value error, "
    return message[len(prefix):] if message.startswith(prefix) else message


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation errors as {"title", "errors": {field: [messages]}}."""
    errors = defaultdict(list)
    for error in exc.errors():
        errors[_field_key(error.get("loc", ()))].append(_clean_message(error.get("msg", "Invalid value")))

    logger.info(f"Request validation failed: path={request.url.path}, fields={sorted(errors)}")
    return JSONResponse(
        status_code=400,
        content={"title": VALIDATION_TITLE, "status": 400, "errors": dict(errors)},
    )


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

API_PREFIX = "/api"

app.include_router(account.router, prefix=API_PREFIX)
app.include_router(company.router, prefix=API_PREFIX)
app.include_router(candidate.router, prefix=API_PREFIX)
app.include_router(job.router, prefix=API_PREFIX)
app.include_router(job_application.router, prefix=API_PREFIX)
app.include_router(resume.router, prefix=API_PREFIX)
app.include_router(job_recommendation.router, prefix=API_PREFIX)
app.include_router(country.router, prefix=API_PREFIX)
app.include_router(city.router, prefix=API_PREFIX)
app.include_router(industry.router, prefix=API_PREFIX)
app.include_router(skill.router, prefix=API_PREFIX)
app.include_router(health.router)

app.mount("/uploads", StaticFiles(directory=config.UPLOAD_DIR, check_dir=False), name="uploads")


# ============================================
# ✅ ROOT
# ============================================

@app.get("/")
def root():
    return {"status": "PunaBoost API running"}
