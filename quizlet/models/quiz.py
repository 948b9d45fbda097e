from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, ForeignKey, Boolean, Text
from quizlet.core.database import Base, TimestampMixin
from quizlet.models.enums import QuizType


class Quiz(TimestampMixin, Base):
    __tablename__ = "quizzes"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    question: Mapped[str] = mapped_column(Text)
    quiz_type: Mapped[str] = mapped_column(String(32), default=QuizType.SINGLE_CHOICE.value)
    created_by_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    selections: Mapped[list["QuizSelection"]] = relationship(
        back_populates="quiz",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="QuizSelection.id",
    )


class QuizSelection(TimestampMixin, Base):
    __tablename__ = "quiz_selections"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    quiz_id: Mapped[int] = mapped_column(ForeignKey("quizzes.id", ondelete="CASCADE"), index=True)
    selection_text: Mapped[str] = mapped_column(Text)
    is_correct: Mapped[bool] = mapped_column(Boolean, default=False)
    quiz: Mapped["Quiz"] = relationship(back_populates="selections")
