import asyncio
from fastapi import FastAPI
from quizlet.core.config import get_settings
from quizlet.api.api_v1 import user_router, auth_router, quiz_router, quiz_suite_router
from quizlet.api.v1.auth import limiter
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from quizlet.core.exceptions import AppException
import logging
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from contextlib import asynccontextmanager, suppress
from quizlet.tasks.cleanup_tokens import periodic_cleanup


settings = get_settings()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code
    logger.info("Starting up the %s API...", settings.PROJECT_NAME)
    task = asyncio.create_task(periodic_cleanup(settings.TOKEN_CLEANUP_INTERVAL_SECONDS))
    app.state.cleanup_task = task
    yield
    # Shutdown code
    task.cancel()
    with suppress(asyncio.CancelledError):
        await task
    logger.info("Shutting down the %s API...", settings.PROJECT_NAME)


app = FastAPI(lifespan=lifespan, title=f"{settings.PROJECT_NAME} API", version="1.0.0")

# CORS setup

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Rate Limiting setup
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Include API routers
app.include_router(user_router, prefix="/api/v1/users", tags=["Users"])
app.include_router(auth_router, prefix="/api/v1/auth", tags=["Authentication"])
app.include_router(quiz_router, prefix="/api/v1/quizzes", tags=["Quizzes"])
app.include_router(quiz_suite_router, prefix="/api/v1/quiz-suites", tags=["Quiz Suites"])

# Global exception handler
@app.exception_handler(AppException)
async def app_exception_handler(request, exc: AppException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )

# Logger setup
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")



@app.get("/health")
def health():
    return {"status": "ok", "message": f"The {settings.PROJECT_NAME} API is alive!"}
