"""
FastAPI app assembly: middleware and router wiring.
"""
import logging
import os
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from casebook.api.activity import router as activity_router
from casebook.api.cases import router as cases_router
from casebook.api.dashboard import router as dashboard_router
from casebook.api.evidence import router as evidence_router, case_evidence_router
from casebook.api.forensic_actions import router as forensic_actions_router, case_actions_router
from casebook.api.suspects import router as suspects_router
from casebook.api.users import router as users_router
from casebook.api.victims import router as victims_router
from casebook.utils.runtime import cors_origins, dev_mode_requested

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Forensic Casebook Service",
    description="API for recording digital-forensics cases with their victims, suspects, evidence and forensic actions.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_MUTATING_METHODS = ("POST", "PUT", "PATCH", "DELETE")


# Middleware: enforce read-only for unauthenticated requests
@app.middleware("http")
async def enforce_readonly_for_guests(request: Request, call_next):
    # In dev mode, allow; the route dependency resolves the dev identity
    if request.method in _MUTATING_METHODS and not dev_mode_requested():
        h = request.headers
        user_present = (
            h.get("x-auth-request-user")
            or h.get("x-auth-request-email")
            or h.get("x-forwarded-user")
            or h.get("x-forwarded-email")
        )
        if not user_present:
            return JSONResponse(
                {"detail": "Guest mode is read-only. Sign in to perform changes."},
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
    return await call_next(request)


app.include_router(users_router)
app.include_router(victims_router)
app.include_router(suspects_router)
app.include_router(cases_router)
app.include_router(case_evidence_router)
app.include_router(evidence_router)
app.include_router(case_actions_router)
app.include_router(forensic_actions_router)
app.include_router(dashboard_router)
app.include_router(activity_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "casebook-service"}
