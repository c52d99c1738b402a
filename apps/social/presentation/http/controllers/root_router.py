"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
"""

from fastapi import APIRouter

from apps.social.presentation.http.controllers.general.health import router as health_router
from apps.social.presentation.http.controllers.oauth.router import router as oauth_router
from apps.social.presentation.http.controllers.posts import router as posts_router
from apps.social.presentation.http.controllers.users import router as users_router

api_router = APIRouter(prefix="/api")
api_router.include_router(oauth_router)
api_router.include_router(posts_router)
api_router.include_router(users_router)

router = APIRouter()
router.include_router(health_router)
router.include_router(api_router)
