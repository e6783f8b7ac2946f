# Role: Process-wide singletons shared by the API routers.

from __future__ import annotations

from pixelseeker.core.session_manager import SessionManager

session_manager = SessionManager()
