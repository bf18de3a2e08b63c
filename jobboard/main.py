# jobboard/main.py
from fastapi import FastAPI

from jobboard.api.v1.admin import router as admin_router
from jobboard.api.v1.ai import router as ai_router
from jobboard.api.v1.applications import router as applications_router
from jobboard.api.v1.companies import router as companies_router
from jobboard.api.v1.employer import router as employer_router
from jobboard.api.v1.jobs import router as jobs_router
from jobboard.api.v1.legal import router as legal_router
from jobboard.api.v1.users import router as users_router
from jobboard.core.config import settings
from jobboard.core.errors import JobBoardError, job_board_error_handler
from jobboard.core.logging import configure_logging
from jobboard.db.mongo import close_db, init_db
from jobboard.services.flow_cache import cache

app = FastAPI(title="Job Board API")

app.add_exception_handler(JobBoardError, job_board_error_handler)

app.include_router(applications_router, prefix="/api/v1")
app.include_router(jobs_router, prefix="/api/v1")
app.include_router(companies_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(employer_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")
app.include_router(legal_router, prefix="/api/v1")
app.include_router(ai_router, prefix="/api/v1")


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.APP_ENV}


@app.on_event("startup")
async def startup_event():
    configure_logging()
    await init_db()


@app.on_event("shutdown")
async def shutdown_event():
    close_db()
    await cache.close()
