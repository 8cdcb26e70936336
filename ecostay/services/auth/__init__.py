"""
Authentication session.
"""

from ecostay.services.auth.session_context import SessionContext

__all__ = ["SessionContext"]
