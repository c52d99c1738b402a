"""HTTP Controllers."""

from apps.social.presentation.http.controllers.oauth.debug import router as debug_router
from apps.social.presentation.http.controllers.root_router import router as root_router

__all__ = ["debug_router", "root_router"]
