# File: expense_tracker/api/v1/routes_users.py

from fastapi import APIRouter, Depends, HTTPException, Path, status

from expense_tracker.api.deps import get_user_service
from expense_tracker.repositories.user_repository import MAX_ID
from expense_tracker.schemas.user import UserCreate, UserResponse
from expense_tracker.services.user_service import UserService

router = APIRouter()


@router.get(
    "/",
    response_model=list[UserResponse],
    summary="List users",
)
def list_users(service: UserService = Depends(get_user_service)):
    return service.list_users()


@router.get(
    "/username/{username}",
    response_model=UserResponse,
    summary="Get user by username",
)
def get_user_by_username(username: str, service: UserService = Depends(get_user_service)):
    user = service.get_user_by_username(username)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {username}",
        )
    return user


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by id",
)
def get_user(
    user_id: int = Path(..., ge=1, le=MAX_ID),
    service: UserService = Depends(get_user_service),
):
    user = service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {user_id}",
        )
    return user


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
):
    """
    Create a user account.

    Duplicate usernames/emails are turned into 409 responses by the
    application-level ``DuplicateUserError`` handler in ``main``.
    """
    return service.create_user(payload)
