"""
Authentication endpoints.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.api.dependencies import get_bearer_token, get_revocation_store, get_session
from app.core.logging_config import log_error, log_info
from app.core.security import InvalidTokenError, decode_access_token, token_expiry
from app.schemas.auth import MessageResponse, TokenResponse, UserLogin, UserRegister
from app.services.token_revocation import RevocationStore
from app.services.user_service import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserService,
)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "User already exists"},
    }
)
async def register(
    user_data: UserRegister,
    session: Annotated[Session, Depends(get_session)],
):
    """Register a new user and return an access token."""
    service = UserService(session)
    try:
        _, token = service.register_user(user_data)
    except UserAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        ) from None
    except Exception as e:
        log_error(e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        ) from e
    return TokenResponse(message="User registered successfully", token=token)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={
        401: {"description": "Invalid credentials"},
        404: {"description": "User not found"},
    }
)
async def login(
    credentials: UserLogin,
    session: Annotated[Session, Depends(get_session)],
):
    """Log in with email and password."""
    service = UserService(session)
    try:
        _, token = service.authenticate(credentials)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        ) from None
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        ) from None
    except Exception as e:
        log_error(e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        ) from e
    return TokenResponse(message="Login successful", token=token)


@router.post(
    "/logout",
    response_model=MessageResponse,
    responses={
        401: {"description": "Not authenticated"},
    }
)
async def logout(
    token: Annotated[str, Depends(get_bearer_token)],
    revocation_store: Annotated[RevocationStore, Depends(get_revocation_store)],
):
    """Revoke the bearer token used for this request."""
    try:
        payload = decode_access_token(token)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None

    try:
        revocation_store.revoke(token, token_expiry(payload))
    except Exception as e:
        log_error(e, user_id=payload.get("sub"))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        ) from e
    log_info("User logged out", user_id=payload.get("sub"))
    return MessageResponse(message="Logout successful")
