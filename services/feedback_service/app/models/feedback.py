from sqlalchemy import Column, Integer, Text

from .database import Base


class Feedback(Base):
    """SQLAlchemy ORM model for feedback records"""

    __tablename__ = 'feedback'

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Text, nullable=False)
    feedback_text = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<Feedback(id={self.id}, employee_id='{self.employee_id}', rating={self.rating})>"
