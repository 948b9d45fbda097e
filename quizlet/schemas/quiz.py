from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from quizlet.models.enums import QuizType


class QuizSelectionCreate(BaseModel):
    selection_text: str = Field(min_length=1)
    is_correct: bool = False


class QuizSelectionResponse(BaseModel):
    id: int
    selection_text: str
    is_correct: bool

    model_config = ConfigDict(from_attributes=True)


class QuizCreate(BaseModel):
    question: str = Field(min_length=1)
    quiz_type: QuizType = QuizType.SINGLE_CHOICE
    selections: list[QuizSelectionCreate] = []


class QuizUpdate(BaseModel):
    question: str | None = Field(default=None, min_length=1)
    quiz_type: QuizType | None = None


class QuizResponse(BaseModel):
    id: int
    question: str
    quiz_type: QuizType
    created_by_id: int
    created_at: datetime
    updated_at: datetime
    selections: list[QuizSelectionResponse] = []

    model_config = ConfigDict(from_attributes=True)
