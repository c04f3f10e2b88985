"""
Journal management endpoints.
"""
import uuid
from datetime import datetime
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_session
from app.core.logging_config import log_error
from app.core.time_utils import ensure_utc
from app.models.user import User
from app.schemas.auth import MessageResponse
from app.schemas.journal import JournalCreate, JournalFilters, JournalResponse, JournalUpdate
from app.services.journal_service import JournalNotFoundError, JournalService

router = APIRouter(prefix="/journals", tags=["journals"])


@router.post(
    "",
    response_model=JournalResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"description": "Not authenticated"},
    }
)
async def create_journal(
    journal_data: JournalCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
):
    """Create a new journal."""
    service = JournalService(session)
    try:
        return service.create_journal(current_user.id, journal_data)
    except Exception as e:
        log_error(e, user_id=str(current_user.id))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while creating journal"
        ) from e


@router.get(
    "",
    response_model=List[JournalResponse],
    responses={
        401: {"description": "Not authenticated"},
    }
)
async def get_journals(
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
    search: Annotated[Optional[str], Query(max_length=200)] = None,
    start_date: Annotated[Optional[datetime], Query()] = None,
    end_date: Annotated[Optional[datetime], Query()] = None,
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    """
    List the current user's journals, newest first.

    Optional filters: text search over title and content, and a creation
    date range.
    """
    if start_date and end_date and ensure_utc(start_date) > ensure_utc(end_date):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start_date must not be after end_date"
        )
    service = JournalService(session)
    filters = JournalFilters(
        search=search,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )
    return service.get_user_journals(current_user.id, filters)


@router.get(
    "/{journal_id}",
    response_model=JournalResponse,
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Journal not found"},
    }
)
async def get_journal(
    journal_id: uuid.UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
):
    service = JournalService(session)
    try:
        return service.get_journal(journal_id, current_user.id)
    except JournalNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal not found"
        ) from None


@router.put(
    "/{journal_id}",
    response_model=JournalResponse,
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Journal not found"},
    }
)
async def update_journal(
    journal_id: uuid.UUID,
    journal_data: JournalUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
):
    """Replace the title and content of a journal."""
    service = JournalService(session)
    try:
        return service.update_journal(journal_id, current_user.id, journal_data)
    except JournalNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal not found"
        ) from None
    except Exception as e:
        log_error(e, user_id=str(current_user.id))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while updating journal"
        ) from e


@router.delete(
    "/{journal_id}",
    response_model=MessageResponse,
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Journal not found"},
    }
)
async def delete_journal(
    journal_id: uuid.UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
):
    service = JournalService(session)
    try:
        service.delete_journal(journal_id, current_user.id)
    except JournalNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal not found"
        ) from None
    except Exception as e:
        log_error(e, user_id=str(current_user.id))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting journal"
        ) from e
    return MessageResponse(message="Journal deleted successfully")
