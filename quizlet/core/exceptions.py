class AppException(Exception):
    def __init__(self, detail: str, status_code: int = 400):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

class ValidationException(AppException):
    def __init__(self, detail: str = "Invalid input"):
        super().__init__(detail=detail, status_code=400)

class EmptyInputError(ValidationException):
    def __init__(self, detail: str = "Input must not be empty"):
        super().__init__(detail=detail)

class UnauthorizedException(AppException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(detail=detail, status_code=401)

class ForbiddenException(AppException):
    def __init__(self, detail: str = "Forbidden"):
        super().__init__(detail=detail, status_code=403)

class ConflictException(AppException):
    def __init__(self, detail: str = "Conflict"):
        super().__init__(detail=detail, status_code=409)

class NotFoundException(AppException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(detail=detail, status_code=404)

class PersistenceError(AppException):
    """Storage failure. The detail never carries driver output."""
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(detail=detail, status_code=500)


# ------------------------------------------------------------------
# Authentication failures. All of them render as 401.
# ------------------------------------------------------------------

class InvalidCredentialsError(UnauthorizedException):
    def __init__(self, detail: str = "Incorrect email or password"):
        super().__init__(detail=detail)

class TokenError(UnauthorizedException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(detail=detail)

class MalformedTokenError(TokenError):
    pass

class BadSignatureError(TokenError):
    pass

class NotYetValidError(TokenError):
    def __init__(self, detail: str = "Token not yet valid"):
        super().__init__(detail=detail)

class ExpiredTokenError(TokenError):
    def __init__(self, detail: str = "Token expired"):
        super().__init__(detail=detail)

class TokenNotFoundError(UnauthorizedException):
    # Revoked and unknown refresh tokens share this error and message
    def __init__(self, detail: str = "Invalid refresh token"):
        super().__init__(detail=detail)
