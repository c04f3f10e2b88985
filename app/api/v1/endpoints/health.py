"""
Health check endpoint.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text
from sqlmodel import Session

from app.api.dependencies import get_session
from app.core.config import settings
from app.core.logging_config import log_error

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(session: Annotated[Session, Depends(get_session)]):
    try:
        session.execute(text("SELECT 1"))
    except Exception as e:
        log_error(e, context="health_check")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable"
        ) from e
    return {"status": "healthy", "version": settings.app_version}
