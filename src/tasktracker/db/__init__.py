"""Database related helpers."""

from __future__ import annotations

from .session import create_engine, create_session_maker, get_session, init_db

__all__ = ["create_engine", "create_session_maker", "get_session", "init_db"]
