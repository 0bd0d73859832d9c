from pydantic import BaseModel, ConfigDict, Field

# Range of the INTEGER columns backing ids and ratings.
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


class FeedbackBase(BaseModel):
    """
    Incoming record payload. Types are checked strictly, so `"5"` is not
    accepted as a rating. An `id` key, if sent, is ignored.
    """

    employee_id: str = Field(alias="employeeId")
    feedback_text: str = Field(alias="feedbackText")
    rating: int = Field(ge=INT32_MIN, le=INT32_MAX)

    model_config = ConfigDict(populate_by_name=True, strict=True)


class FeedbackCreate(FeedbackBase):
    pass


class FeedbackUpdate(FeedbackBase):
    # Updates replace all three fields wholesale.
    pass


class FeedbackResponse(BaseModel):
    id: int
    employee_id: str = Field(serialization_alias="employeeId")
    feedback_text: str = Field(serialization_alias="feedbackText")
    rating: int

    model_config = ConfigDict(from_attributes=True)
