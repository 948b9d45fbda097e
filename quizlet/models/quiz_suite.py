from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, ForeignKey, Text
from quizlet.core.database import Base, TimestampMixin


class QuizSuite(TimestampMixin, Base):
    __tablename__ = "quiz_suites"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    created_by_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    attempts: Mapped[list["QuizAttempt"]] = relationship(cascade="all, delete")
