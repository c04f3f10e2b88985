"""
Journal import endpoint.
"""
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_session
from app.core.logging_config import log_error, log_warning
from app.data_transfer import ImportInputError
from app.data_transfer.archive_reader import is_supported_upload
from app.models.user import User
from app.schemas.dto import ImportResponse
from app.services.import_service import ImportService
from app.utils.import_export import UploadManager, UploadTooLargeError

router = APIRouter(prefix="/journals", tags=["import"])


@router.post(
    "/import",
    response_model=ImportResponse,
    responses={
        400: {"description": "File cannot be imported"},
        401: {"description": "Not authenticated"},
        413: {"description": "File too large"},
        500: {"description": "Internal server error"},
    }
)
async def import_journals(
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
    file: Annotated[Optional[UploadFile], File()] = None,
):
    """
    Import journals from an exported ZIP or JSON file.

    The file must hold ``{"entries": [...]}``; each entry needs ``text``,
    ``creationDate`` and ``modifiedDate``. Entries missing a field are
    skipped and reported in ``skippedCount``.
    """
    if file is None or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )
    if not is_supported_upload(file.content_type, file.filename):
        log_warning(
            "Rejected import upload with unsupported type",
            user_id=str(current_user.id),
            content_type=file.content_type,
            filename=file.filename,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only ZIP or JSON files are allowed"
        )

    try:
        staged_path = await UploadManager().stage(file)
    except UploadTooLargeError as e:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=str(e)
        ) from None

    service = ImportService(session)
    try:
        # The pipeline is synchronous and may sleep between cleanup attempts.
        result = await run_in_threadpool(
            service.run_import,
            staged_path,
            current_user.id,
            content_type=file.content_type,
            filename=file.filename,
        )
    except ImportInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        ) from None
    except Exception as e:
        log_error(e, user_id=str(current_user.id))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while importing journals"
        ) from e

    return ImportResponse(
        message="Journals imported successfully",
        **result.model_dump(),
    )
