"""OAuth Router."""

from fastapi import APIRouter

from apps.social.presentation.http.controllers.oauth.callback import router as callback_router
from apps.social.presentation.http.controllers.oauth.start import router as start_router

router = APIRouter(tags=["oauth"])

router.include_router(start_router)
router.include_router(callback_router)
