from fastapi import APIRouter, Depends

from userhub.api.deps import get_user_service, require_token
from userhub.core.security import TokenClaims
from userhub.schemas.user import UserRead, UserResponse
from userhub.services.user_service import UserService

router = APIRouter()


@router.get(
    "/protected-route",
    response_model=UserResponse,
    summary="Return the caller's own record (token required)",
)
def protected_route(
    claims: TokenClaims = Depends(require_token),
    users: UserService = Depends(get_user_service),
):
    # Token problems were already answered by require_token; the only failure
    # left is a subject that no longer exists (404).
    user = users.get(claims.subject_id)
    return UserResponse(message="Protected route accessed", user=UserRead.model_validate(user))
