"""Session management package."""

from synthdata.sessions.manager import SessionManager

__all__ = ["SessionManager"]
