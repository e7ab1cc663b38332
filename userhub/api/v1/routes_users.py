# File: userhub/api/v1/routes_users.py

from fastapi import APIRouter, Depends

from userhub.api.deps import get_user_service
from userhub.schemas.user import (
    DeletedUserResponse,
    UpdatedUserResponse,
    UserListResponse,
    UserRead,
    UserResponse,
    UserUpdate,
)
from userhub.services.user_service import UserService

router = APIRouter()


@router.get("/user/{user_id}", response_model=UserResponse, summary="Get a user by id")
def get_user(user_id: str, users: UserService = Depends(get_user_service)):
    user = users.get(user_id)
    return UserResponse(
        message="User data retrieved successfully",
        user=UserRead.model_validate(user),
    )


@router.get("/users", response_model=UserListResponse, summary="List all users")
def list_users(users: UserService = Depends(get_user_service)):
    return UserListResponse(users=[UserRead.model_validate(u) for u in users.list_all()])


@router.delete("/user/{user_id}", response_model=DeletedUserResponse, summary="Delete a user")
def delete_user(user_id: str, users: UserService = Depends(get_user_service)):
    user = users.delete(user_id)
    return DeletedUserResponse(
        message="User deleted successfully",
        deleted_user=UserRead.model_validate(user),
    )


@router.put("/user/{user_id}", response_model=UpdatedUserResponse, summary="Update a user")
def update_user(
    user_id: str,
    payload: UserUpdate,
    users: UserService = Depends(get_user_service),
):
    """
    Partial update: only fields present in the body change.
    """
    user = users.update(user_id, payload)
    return UpdatedUserResponse(
        message="User updated successfully",
        updated_user=UserRead.model_validate(user),
    )
