from datetime import timedelta
from typing import Annotated
from fastapi import Depends
from quizlet.core.config import get_settings
from quizlet.core.exceptions import UnauthorizedException
from quizlet.core.database import get_db
from quizlet.core.security import AccessTokenIssuer, PasswordHasher, get_access_token_issuer, get_password_hasher
from sqlalchemy.ext.asyncio import AsyncSession
from quizlet.models.user import User
from quizlet.repositories.user_repo import UserRepository
from quizlet.repositories.token_repo import TokenRepository
from quizlet.repositories.quiz_repo import QuizRepository
from quizlet.repositories.quiz_suite_repo import QuizSuiteRepository
from quizlet.repositories.quiz_attempt_repo import QuizAttemptRepository
from quizlet.schemas.token import AccessTokenClaims
from quizlet.services.user_service import UserService
from quizlet.services.auth_service import AuthService
from quizlet.services.refresh_token_store import RefreshTokenStore
from quizlet.services.quiz_service import QuizService
from quizlet.services.quiz_suite_service import QuizSuiteService
from quizlet.services.quiz_attempt_service import QuizAttemptService
from fastapi.security import OAuth2PasswordBearer

db_dependency = Annotated[AsyncSession, Depends(get_db)]
reusable_oauth2 = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

hasher_dependency = Annotated[PasswordHasher, Depends(get_password_hasher)]
issuer_dependency = Annotated[AccessTokenIssuer, Depends(get_access_token_issuer)]

async def get_user_repo(db: db_dependency)-> UserRepository:
    return UserRepository(db)

user_dependency = Annotated[UserRepository, Depends(get_user_repo)]


async def get_token_repo(db: db_dependency) -> TokenRepository:
    return TokenRepository(db)

token_dependency = Annotated[TokenRepository, Depends(get_token_repo)]

async def get_refresh_token_store(token_repo: token_dependency) -> RefreshTokenStore:
    lifetime = timedelta(days=get_settings().REFRESH_TOKEN_EXPIRE_DAYS)
    return RefreshTokenStore(token_repo, lifetime=lifetime)

token_store_dependency = Annotated[RefreshTokenStore, Depends(get_refresh_token_store)]


async def get_user_service(
    user_repo: user_dependency,
    token_store: token_store_dependency,
    hasher: hasher_dependency,
) -> UserService:
    return UserService(user_repo, token_store, hasher)

async def get_auth_service(
    user_repo: user_dependency,
    token_store: token_store_dependency,
    hasher: hasher_dependency,
    issuer: issuer_dependency,
) -> AuthService:
    return AuthService(user_repo, token_store, hasher, issuer)


async def get_quiz_service(db: db_dependency) -> QuizService:
    return QuizService(QuizRepository(db))

async def get_quiz_suite_service(db: db_dependency) -> QuizSuiteService:
    return QuizSuiteService(QuizSuiteRepository(db))

async def get_quiz_attempt_service(db: db_dependency) -> QuizAttemptService:
    return QuizAttemptService(QuizAttemptRepository(db), QuizSuiteRepository(db))


async def get_token_claims(token: Annotated[str, Depends(reusable_oauth2)], issuer: issuer_dependency) -> AccessTokenClaims:
    return issuer.verify(token)

claims_dependency = Annotated[AccessTokenClaims, Depends(get_token_claims)]


async def get_current_user(claims: claims_dependency, user_repo: user_dependency) -> User:
    user = await user_repo.get_by_id(claims.user_id)
    if not user:
        raise UnauthorizedException(detail="Unauthorized User")
    return user

current_user_dependency = Annotated[User, Depends(get_current_user)]
