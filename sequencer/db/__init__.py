"""Database package with engine and session management."""

from sequencer.db.session import create_engine, create_session_maker, get_session_maker

__all__ = [
    "create_engine",
    "create_session_maker",
    "get_session_maker",
]
