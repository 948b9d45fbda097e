from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class QuizSuiteCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""


class QuizSuiteUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class QuizSuiteResponse(BaseModel):
    id: int
    title: str
    description: str
    created_by_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
