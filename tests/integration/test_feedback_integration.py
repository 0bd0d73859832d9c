import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from services.feedback_service.app.models.database import init_db
from services.feedback_service.app.models.feedback import Feedback
from services.feedback_service.app.schemas.feedback import FeedbackCreate, FeedbackUpdate
from services.feedback_service.app.services.feedback import FeedbackService

# Use a separate test database
TEST_DATABASE_URL = os.environ.get("FEEDBACK_DATABASE_URL")

pytestmark = pytest.mark.skipif(
    not TEST_DATABASE_URL, reason="FEEDBACK_DATABASE_URL is not set"
)


@pytest.fixture(scope="module")
def engine():
    engine = create_engine(TEST_DATABASE_URL)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """
    Pytest fixture to provide a database session for each test function.
    Everything a test writes is rolled back afterwards.
    """
    connection = engine.connect()
    transaction = connection.begin()
    TestingSessionLocal = sessionmaker(
        bind=connection,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    session = TestingSessionLocal()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


def test_create_and_get_feedback(db_session):
    """
    Test creating a feedback record and retrieving it.
    """
    service = FeedbackService(db_session)

    created = service.create_feedback(
        FeedbackCreate(employee_id="E1", feedback_text="This is a test feedback.", rating=5)
    )
    assert created.id is not None
    assert created.id > 0

    retrieved = db_session.query(Feedback).filter(Feedback.id == created.id).first()
    assert retrieved is not None
    assert retrieved.feedback_text == "This is a test feedback."
    assert retrieved.rating == 5


def test_update_and_delete_feedback(db_session):
    service = FeedbackService(db_session)
    created = service.create_feedback(
        FeedbackCreate(employee_id="E1", feedback_text="Initial", rating=1)
    )

    service.update_feedback(
        created.id, FeedbackUpdate(employee_id="E2", feedback_text="Revised", rating=2)
    )
    db_session.expire_all()
    retrieved = db_session.get(Feedback, created.id)
    assert (retrieved.employee_id, retrieved.feedback_text, retrieved.rating) == ("E2", "Revised", 2)

    assert service.delete_feedback(created.id) == 1
    assert service.delete_feedback(created.id) == 0
    assert db_session.get(Feedback, created.id) is None
