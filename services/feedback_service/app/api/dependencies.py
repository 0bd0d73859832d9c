from sqlalchemy.orm import Session
from fastapi import Depends

from ..services.feedback import FeedbackService
from ..models.database import get_db

def get_feedback_service(db: Session = Depends(get_db)) -> FeedbackService:
    """Hand each request a service bound to its own session."""
    return FeedbackService(db)
