"""Errors raised by the CourtListener client."""


class CourtListenerError(Exception):
    """Base class for every failure surfaced by CourtListenerClient."""

    message = "CourtListener request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidURLError(CourtListenerError):
    message = "The API URL is not valid"


class InvalidResponseError(CourtListenerError):
    message = "The API returned an unexpected response"


class InvalidDataError(CourtListenerError):
    message = "The API returned data that couldn't be processed"


class UnauthorizedError(CourtListenerError):
    message = "The API token is invalid or missing"


class ForbiddenError(CourtListenerError):
    message = "The API token is forbidden"


class RateLimitedError(CourtListenerError):
    message = "Too many requests to the API. Please try again later."


class ServerError(CourtListenerError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Server error with status code: {status_code}")


class NetworkError(CourtListenerError):
    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class UnknownError(CourtListenerError):
    def __init__(self, message: str):
        super().__init__(f"Unknown error: {message}")


# Auth failures are never retried and never absorbed by the client
NON_RETRYABLE = (UnauthorizedError, ForbiddenError)
