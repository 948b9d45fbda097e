from quizlet.api.v1.auth import router as auth_router
from quizlet.api.v1.users import router as user_router
from quizlet.api.v1.quizzes import router as quiz_router
from quizlet.api.v1.quiz_suites import router as quiz_suite_router

__all__ = ["auth_router", "user_router", "quiz_router", "quiz_suite_router"]
