"""
App assembly entry point.

Re-exports the FastAPI `app` from `casebook.api.main` for `uvicorn app:app`.
"""

from casebook.api.main import app  # noqa: F401
