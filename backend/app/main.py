import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone

from app.config import ALLOWED_ORIGINS
from core.environment import validate_required_env_vars, is_production
from app.middleware.error_handler import register_error_handlers
from app.routes import intake, load_calc, job

logger = logging.getLogger(__name__)

missing_vars = validate_required_env_vars(["OPENAI_API_KEY"])
if missing_vars:
    logger.warning(f"Missing environment variables: {', '.join(missing_vars)}; photo intake will be unavailable")

app = FastAPI(
    title="HVAC Intake API",
    version="1.0.0",
    description="Photo intake, equipment enrichment and Manual-J-lite load estimates",
    docs_url=None if is_production() else "/docs",
    redoc_url=None if is_production() else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)

register_error_handlers(app)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"RESPONSE: {response.status_code}")
    return response


app.include_router(intake.router, prefix="/api/v1/intake")
app.include_router(load_calc.router, prefix="/api/v1/load-calc")
app.include_router(job.router, prefix="/api/v1/job")


@app.get("/")
async def root():
    return {"message": "HVAC Intake API is running"}


@app.get("/healthz")
async def healthz():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "hvac-intake-api",
    }
