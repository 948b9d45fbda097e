# Import every model so relationship() targets resolve on first use
from quizlet.models.user import User
from quizlet.models.token import RefreshToken
from quizlet.models.quiz import Quiz, QuizSelection
from quizlet.models.quiz_suite import QuizSuite
from quizlet.models.quiz_attempt import QuizAttempt

__all__ = ["User", "RefreshToken", "Quiz", "QuizSelection", "QuizSuite", "QuizAttempt"]
