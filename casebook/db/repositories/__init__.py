"""
Per-domain repository modules for database access.

Each module wraps the SQLAlchemy queries for one table family; routers and
services call these functions instead of building queries inline.
"""
