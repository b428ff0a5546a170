from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shiftplan.core.config import settings
from shiftplan.core.logging_config import configure_logging
from shiftplan.api.v1.shifts import router as shifts_router
from shiftplan.api.v1.templates import router as templates_router
from shiftplan.api.v1.coverage import router as coverage_router
from shiftplan.api.v1.stats import router as stats_router
from shiftplan.api.v1.settings import router as settings_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = configure_logging(settings.LOG_LEVEL)
    logger.info("Shiftplan API starting (env=%s)", settings.APP_ENV)
    yield


app = FastAPI(
    title="Shiftplan API",
    description="Shift planning: intervals, conflicts and coverage",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"

app.include_router(shifts_router, prefix=API_PREFIX)
app.include_router(templates_router, prefix=API_PREFIX)
app.include_router(coverage_router, prefix=API_PREFIX)
app.include_router(stats_router, prefix=API_PREFIX)
app.include_router(settings_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Shiftplan API", "version": "1.0.0"}
