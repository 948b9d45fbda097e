from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String
from quizlet.core.database import Base, TimestampMixin

class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String, unique=True, index=True)
    username: Mapped[str] = mapped_column(String, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String)
    tokens: Mapped[list["RefreshToken"]] = relationship(back_populates="user", cascade="all, delete-orphan")
    quizzes: Mapped[list["Quiz"]] = relationship(cascade="all, delete")
    quiz_suites: Mapped[list["QuizSuite"]] = relationship(cascade="all, delete")
    quiz_attempts: Mapped[list["QuizAttempt"]] = relationship(cascade="all, delete")
