from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

import structlog

from account_tiering.config import settings
from account_tiering.core.exceptions import WizardException
from account_tiering.logging_config import configure_logging

# IMPORT ROUTERS
from account_tiering.routers.errors import validation_exception_handler, wizard_exception_handler
from account_tiering.routers.health import router as health_router
from account_tiering.routers.reference import router as reference_router
from account_tiering.routers.sessions import router as sessions_router
from account_tiering.routers.criteria import router as criteria_router
from account_tiering.routers.accounts import router as accounts_router
from account_tiering.routers.results import router as results_router

configure_logging(settings)
logger = structlog.get_logger(__name__)


# SWAGGER UI tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Reference"},
    {"name": "Sessions"},
    {"name": "Criteria Builder"},
    {"name": "Account Evaluation"},
    {"name": "Results & Tiering"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(WizardException, wizard_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)        # Health
app.include_router(reference_router)     # Reference
app.include_router(sessions_router)      # Sessions / Step 1 company setup
app.include_router(criteria_router)      # Step 2 criteria builder
app.include_router(accounts_router)      # Step 3 account evaluation
app.include_router(results_router)       # Step 4 results & CSV export


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    logger.info("service_starting", app=settings.APP_NAME, env=settings.APP_ENV, docs="/docs")


# SHUTDOWN EVENT
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("service_stopping", app=settings.APP_NAME)


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "account_tiering.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
