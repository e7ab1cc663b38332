from fastapi import APIRouter

from userhub.api.v1.routes_auth import router as auth_router
from userhub.api.v1.routes_protected import router as protected_router
from userhub.api.v1.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(users_router, tags=["users"])
api_router.include_router(protected_router, tags=["protected"])
