import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import FeedbackStoreError
from ..models.feedback import Feedback
from ..schemas.feedback import FeedbackCreate, FeedbackUpdate

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, message: str) -> FeedbackStoreError:
        self.db.rollback()
        logger.exception(message)
        return FeedbackStoreError(message)

    def list_feedback(self) -> List[Feedback]:
        """
        Retrieves every stored feedback record.

        Rows come back in the table's natural scan order; nothing is sorted.

        Returns:
            A list of Feedback ORM objects, empty when the table is empty.
        """
        try:
            return self.db.query(Feedback).all()
        except SQLAlchemyError as exc:
            raise self._fail("Failed to fetch") from exc

    def create_feedback(self, feedback_data: FeedbackCreate) -> Feedback:
        """
        Inserts a new feedback record.

        Args:
            feedback_data: The validated payload. Any client-sent id was
                already dropped during validation.

        Returns:
            The new Feedback ORM object with its store-assigned id.
        """
        db_feedback = Feedback(
            employee_id=feedback_data.employee_id,
            feedback_text=feedback_data.feedback_text,
            rating=feedback_data.rating,
        )
        try:
            self.db.add(db_feedback)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("Failed to insert") from exc
        logger.info("Created feedback id=%s", db_feedback.id)
        return db_feedback

    def update_feedback(self, feedback_id: int, feedback_data: FeedbackUpdate) -> Feedback:
        """
        Replaces all mutable fields of the record with the given id.

        The update is unconditional. When no row has that id nothing
        changes, but the submitted data is still echoed back.

        Args:
            feedback_id: The id taken from the request path.
            feedback_data: The full replacement payload.

        Returns:
            A detached Feedback carrying the requested id and submitted fields.
        """
        values = {
            Feedback.employee_id: feedback_data.employee_id,
            Feedback.feedback_text: feedback_data.feedback_text,
            Feedback.rating: feedback_data.rating,
        }
        try:
            num_updated = self.db.query(Feedback).filter(
                Feedback.id == feedback_id
            ).update(values, synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("Failed to update") from exc
        logger.info("Updated feedback id=%s rows=%s", feedback_id, num_updated)
        return Feedback(
            id=feedback_id,
            employee_id=feedback_data.employee_id,
            feedback_text=feedback_data.feedback_text,
            rating=feedback_data.rating,
        )

    def delete_feedback(self, feedback_id: int) -> int:
        """
        Deletes the record with the given id.

        Returns:
            The number of rows removed; 0 when the id did not exist.
        """
        try:
            num_deleted = self.db.query(Feedback).filter(
                Feedback.id == feedback_id
            ).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("Failed to delete") from exc
        logger.info("Deleted feedback id=%s rows=%s", feedback_id, num_deleted)
        return num_deleted
