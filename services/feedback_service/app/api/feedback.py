from fastapi import APIRouter, Depends, HTTPException, Path, status
from fastapi.responses import PlainTextResponse
from typing import List

from ..schemas.feedback import (
    INT32_MAX,
    INT32_MIN,
    FeedbackCreate,
    FeedbackUpdate,
    FeedbackResponse,
)
from ..services.feedback import FeedbackService
from .dependencies import get_feedback_service

router = APIRouter()

@router.get("", response_model=List[FeedbackResponse])
def list_feedback(
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Get every stored feedback record.
    """
    return service.list_feedback()

@router.post("", response_model=FeedbackResponse)
def create_feedback(
    feedback_data: FeedbackCreate,
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Create a new feedback record. The id is assigned by the database.
    """
    return service.create_feedback(feedback_data=feedback_data)

@router.put("/", include_in_schema=False)
def update_feedback_missing_id():
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ID")

@router.put("/{feedback_id}", response_model=FeedbackResponse)
def update_feedback(
    feedback_data: FeedbackUpdate,
    feedback_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX),
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Replace a feedback record. Unknown ids are not reported as errors.
    """
    return service.update_feedback(feedback_id=feedback_id, feedback_data=feedback_data)

@router.put("/{feedback_id}/{extra:path}", include_in_schema=False)
def update_feedback_invalid_url(feedback_id: str, extra: str):
    # /feedback/delete/... only accepts DELETE.
    if feedback_id == "delete":
        raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, detail="Method not allowed")
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid URL")

@router.delete("/delete/", include_in_schema=False)
def delete_feedback_missing_id():
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ID")

@router.delete("/delete/{feedback_id}", response_class=PlainTextResponse)
def delete_feedback(
    feedback_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX),
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Delete a feedback record. Unknown ids are not reported as errors.
    """
    service.delete_feedback(feedback_id=feedback_id)
    return f"Feedback with ID {feedback_id} deleted"

@router.delete("/delete/{feedback_id}/{extra:path}", include_in_schema=False)
def delete_feedback_invalid_url(feedback_id: str, extra: str):
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid URL")
