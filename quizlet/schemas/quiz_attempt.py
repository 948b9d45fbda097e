from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class QuizAttemptCreate(BaseModel):
    score: int = Field(ge=0, le=100)
    completed: bool = False


class QuizAttemptUpdate(BaseModel):
    score: int | None = Field(default=None, ge=0, le=100)
    completed: bool | None = None


class QuizAttemptResponse(BaseModel):
    id: int
    user_id: int
    quiz_suite_id: int
    score: int
    completed: bool
    started_at: datetime
    completed_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
