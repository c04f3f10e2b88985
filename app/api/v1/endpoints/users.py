"""
Current-user endpoints.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_session
from app.core.logging_config import log_error
from app.models.user import User
from app.schemas.auth import MessageResponse
from app.schemas.user import UserInfoResponse, UserResponse
from app.services.user_service import UserNotFoundError, UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me",
    response_model=UserInfoResponse,
    responses={
        401: {"description": "Not authenticated"},
    }
)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
):
    """Return the current user and their journal count."""
    service = UserService(session)
    try:
        user, total = service.get_user_info(current_user.id)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        ) from None
    return UserInfoResponse(user=UserResponse.model_validate(user), total_journals=total)


@router.delete(
    "/me",
    response_model=MessageResponse,
    responses={
        401: {"description": "Not authenticated"},
    }
)
async def delete_me(
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
):
    """Delete the current user and all of their journals."""
    service = UserService(session)
    try:
        service.delete_user(current_user.id)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        ) from None
    except Exception as e:
        log_error(e, user_id=str(current_user.id))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        ) from e
    return MessageResponse(message="User deleted successfully")
