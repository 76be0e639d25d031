# common/deps.py
from contextlib import contextmanager
from typing import Iterator

from fastapi import Depends, Request

from core.config import Settings
from core.db import open_connection


# ---------------------------
# Settings
# ---------------------------
def get_settings(request: Request) -> Settings:
    """Settings built once by create_app() and parked on app.state."""
    return request.app.state.settings


# ---------------------------
# Database connections
# ---------------------------
@contextmanager
def db_conn(settings: Settings) -> Iterator:
    """
    Context manager for a single, short-lived inventory DB connection.
    Automatically commits on successful exit, rolls back on exception,
    and always closes the connection.
    Usage:
        with db_conn(settings) as conn:
            with conn.cursor() as cur: ...
    """
    conn = open_connection(settings)
    try:
        yield conn
        conn.commit()  # Auto-commit on success (including read operations)
    except Exception:
        conn.rollback()  # Auto-rollback on error
        raise
    finally:
        conn.close()


# ---------------------------
# Repositories
# ---------------------------
def get_inventory_repo(settings: Settings = Depends(get_settings)):
    """FastAPI dependency; tests swap it out via app.dependency_overrides."""
    from modules.inventory.repo import InventoryRepo
    return InventoryRepo(settings)
