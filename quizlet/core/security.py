import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable

from jose import jwt, jws, JWTError, JWSError
from passlib.context import CryptContext
from pydantic import ValidationError

from quizlet.core.config import get_settings
from quizlet.core.exceptions import (
    BadSignatureError,
    EmptyInputError,
    ExpiredTokenError,
    MalformedTokenError,
    NotYetValidError,
    ValidationException,
)
from quizlet.schemas.token import AccessTokenClaims
from quizlet.schemas.user import MAX_PASSWORD_BYTES

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PasswordHasher:
    """bcrypt hashing with a configurable work factor."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        if not password:
            raise EmptyInputError(detail="Password must not be empty")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationException(detail=f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            # could only match through bcrypt truncation
            self._context.dummy_verify()
            return False
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            # unidentifiable or corrupt hash
            return False

    def dummy_verify(self) -> None:
        """Spend the cost of one verification without a stored hash."""
        self._context.dummy_verify()


class AccessTokenIssuer:
    """
    Issues and verifies short-lived signed access tokens.

    Tokens are stateless: validity depends only on the signature, the
    embedded timestamps and the current time, so they cannot be revoked
    before ``exp``.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(minutes=15),
        clock: Clock = utcnow,
    ):
        if not secret_key:
            raise ValueError("secret_key must be configured")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = lifetime
        self._clock = clock

    @property
    def lifetime_seconds(self) -> int:
        return int(self.lifetime.total_seconds())

    def issue(self, user_id: int) -> str:
        now = int(self._clock().timestamp())
        claims = {
            "sub": str(user_id),
            "user_id": user_id,
            "iat": now,
            "nbf": now,
            "exp": now + self.lifetime_seconds,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> AccessTokenClaims:
        try:
            header = jwt.get_unverified_header(token)
        except JWTError as exc:
            raise MalformedTokenError() from exc

        # Pin the algorithm before touching the key
        if header.get("alg") != self.algorithm:
            raise BadSignatureError()

        try:
            payload = jws.verify(token, self._secret_key, algorithms=[self.algorithm])
        except JWSError as exc:
            raise BadSignatureError() from exc

        try:
            claims = AccessTokenClaims.model_validate_json(payload)
        except ValidationError as exc:
            raise MalformedTokenError() from exc

        now = self._clock().timestamp()
        if now < claims.nbf:
            raise NotYetValidError()
        if now >= claims.exp:
            raise ExpiredTokenError()
        return claims


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def generate_token_secret() -> str:
    return secrets.token_urlsafe(32)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)


@lru_cache
def get_access_token_issuer() -> AccessTokenIssuer:
    settings = get_settings()
    return AccessTokenIssuer(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        lifetime=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
